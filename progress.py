"""
Cosmetic progress indicator shown while an analysis request is outstanding.

The percentage is simulated and says nothing about the real request. The
simulator and the request run as two independent tasks; the only thing
they share is a single-slot "done" signal.
"""
import logging
import random
import threading
from concurrent.futures import ThreadPoolExecutor

from config import PROGRESS_INTERVAL
from constants import PROGRESS_MESSAGES

logger = logging.getLogger(__name__)

MIN_INCREMENT = 5.0
MAX_INCREMENT = 20.0
PENDING_CAP = 95.0


class ProgressSimulator:
    """
    Ticks every ``interval`` seconds, adding a random increment to the
    percentage and rotating through PROGRESS_MESSAGES. Holds at
    PENDING_CAP until ``complete()`` is called, then reports exactly 100.
    """

    def __init__(self, interval=PROGRESS_INTERVAL, on_update=None, rng=None, cap=PENDING_CAP):
        self.interval = interval
        self.on_update = on_update
        self.cap = min(cap, 100.0)
        self.progress = 0.0
        self.message_index = 0
        self.done = threading.Event()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._wakeup = threading.Event()
        self._stopped = threading.Event()
        self._halted = threading.Event()
        self._thread = None

    @property
    def message(self):
        return PROGRESS_MESSAGES[self.message_index]

    @property
    def finished(self):
        return self.progress >= 100.0

    def tick(self):
        """Advance by one step and report the new value."""
        with self._lock:
            if self.done.is_set():
                self.progress = 100.0
            else:
                increment = self._rng.uniform(MIN_INCREMENT, MAX_INCREMENT)
                self.progress = min(self.progress + increment, self.cap)

            threshold = 100.0 / len(PROGRESS_MESSAGES)
            while (self.message_index < len(PROGRESS_MESSAGES) - 1
                   and self.progress > (self.message_index + 1) * threshold):
                self.message_index += 1

            progress, message = self.progress, self.message

        if self.on_update:
            self.on_update(progress, message)
        if progress >= 100.0:
            self._halted.set()
        return progress

    def start(self):
        if self._thread is not None:
            raise RuntimeError("Progress simulator already started")
        self._thread = threading.Thread(target=self._run, name="progress-simulator", daemon=True)
        self._thread.start()

    def complete(self):
        """Set the done signal; the next tick reports 100."""
        self.done.set()
        self._wakeup.set()

    def stop(self):
        """Cancel the timer. No update is emitted after this returns."""
        self._stopped.set()
        self._wakeup.set()
        self._halted.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def wait(self, timeout=None):
        """Block until the simulator reached 100 or was stopped."""
        self._halted.wait(timeout)
        return self.progress

    def _run(self):
        try:
            while not self._stopped.is_set():
                if self.tick() >= 100.0:
                    return
                # complete() and stop() cut the wait short
                self._wakeup.wait(self.interval)
                self._wakeup.clear()
        except Exception:
            logger.exception("Progress update failed; simulator halted")
        finally:
            # wait() must never outlive the timer thread
            self._halted.set()


def run_with_progress(fn, *args, simulator=None, **kwargs):
    """
    Run ``fn`` in a worker thread while ``simulator`` ticks.

    Returns once the call has settled and the simulator has reported 100
    (or was stopped). Exceptions raised by ``fn`` are re-raised here.
    """
    simulator = simulator or ProgressSimulator()
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="analysis-request") as executor:
        future = executor.submit(fn, *args, **kwargs)
        future.add_done_callback(lambda _: simulator.complete())
        simulator.start()
        try:
            simulator.wait()
        finally:
            simulator.stop()
        logger.info(f"Progress finished at {simulator.progress:.0f}%")
        return future.result()

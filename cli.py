"""Command line interface for the Legal Document Explainer."""

import logging
from pathlib import Path
from typing import Optional

import typer

from client import AnalysisClient
from config import ANALYSIS_SERVICE_URL, REQUEST_TIMEOUT, API_HOST, API_PORT
from constants import DEFAULT_LANGUAGE, LANGUAGE_NAMES, SAMPLE_DOCUMENTS
from renderer import save_report
from schemas import Preferences
from session import AnalysisSession

app = typer.Typer(help="LawSimple - plain-language explanations of legal documents")


def _print_progress(progress, message):
    typer.echo(f"\r[{progress:5.1f}%] {message:<45}", nl=False)


@app.command()
def analyze(
    source: Optional[str] = typer.Argument(None, help="Path to a .pdf/.txt file, or the document text itself"),
    sample: Optional[str] = typer.Option(None, "--sample", "-s", help="Analyze a bundled sample contract instead (see `samples`)"),
    language: str = typer.Option(DEFAULT_LANGUAGE, "--language", "-l", help="Response language code"),
    theme: str = typer.Option("light", "--theme", help="Theme for the HTML view (light or dark)"),
    service_url: str = typer.Option(ANALYSIS_SERVICE_URL, "--service-url", help="Analysis service endpoint"),
    timeout: float = typer.Option(REQUEST_TIMEOUT, "--timeout", help="Request deadline in seconds"),
    report: Optional[Path] = typer.Option(None, "--report", help="Directory to save the text report in"),
    html: Optional[Path] = typer.Option(None, "--html", help="Write the split view HTML to this file"),
):
    """Analyze a document and print its summary, key points and clauses."""
    logging.basicConfig(level=logging.WARNING)

    if language not in LANGUAGE_NAMES:
        typer.echo(f"Unsupported language '{language}'. Choose one of: {', '.join(LANGUAGE_NAMES)}", err=True)
        raise typer.Exit(code=2)

    if (source is None) == (sample is None):
        typer.echo("Give either a document or --sample, not both", err=True)
        raise typer.Exit(code=2)
    if sample is not None and sample not in SAMPLE_DOCUMENTS:
        typer.echo(f"Unknown sample '{sample}'. Choose one of: {', '.join(SAMPLE_DOCUMENTS)}", err=True)
        raise typer.Exit(code=2)

    session = AnalysisSession(
        client=AnalysisClient(service_url=service_url, timeout=timeout),
        preferences=Preferences(language=language, theme="dark" if theme == "dark" else "light"),
        on_progress=_print_progress,
    )

    if sample is not None:
        session.load_text(SAMPLE_DOCUMENTS[sample]["content"])
        typer.echo(f"Loaded sample: {SAMPLE_DOCUMENTS[sample]['title']}")
    elif Path(source).is_file():
        session.load_file(Path(source))
    else:
        session.load_text(source)

    try:
        view = session.run()
    finally:
        session.close()
    typer.echo("")

    if view["error"]:
        typer.echo(f"❌ {view['error']}", err=True)
    else:
        typer.echo(view["summary"])
        for point_type, points in view["key_point_groups"].items():
            for point in points:
                typer.echo(f"  [{point_type}] {point.text}")
        for item in view["accordion"]:
            typer.echo(f"  - {item['title']} ({item['risk_label']})")

    if report:
        report.mkdir(parents=True, exist_ok=True)
        report_path = save_report(session.result, report, session.file_name)
        typer.echo(f"✅ Report saved to {report_path}")

    if html:
        html.write_text(session.html(), encoding="utf-8")
        typer.echo(f"✅ Split view saved to {html}")

    if session.error is not None:
        raise typer.Exit(code=1)


@app.command()
def samples():
    """List the bundled sample contracts."""
    for name, sample in SAMPLE_DOCUMENTS.items():
        typer.echo(f"{name:<12} {sample['title']} ({sample['type']})")


@app.command()
def serve(
    host: str = typer.Option(API_HOST, "--host"),
    port: int = typer.Option(API_PORT, "--port"),
    debug: bool = typer.Option(False, "--debug"),
):
    """Start the analysis service."""
    from app import run_server

    run_server(host=host, port=port, debug=debug)


def main():
    app()


if __name__ == "__main__":
    main()

"""
Keyword highlighting over the original document text.

All term sets are matched in one pass, so every matched word is tagged
with exactly one category and already-wrapped text is never scanned again.
"""
import re

from markupsafe import escape

from constants import HIGHLIGHT_TERMS

_GROUPS = []
_seen = set()
for _category, _terms in HIGHLIGHT_TERMS.items():
    # A term already claimed by a higher-priority category is skipped
    _own = [term for term in _terms if term.casefold() not in _seen]
    _seen.update(term.casefold() for term in _own)
    if _own:
        _GROUPS.append(f"(?P<{_category}>" + "|".join(re.escape(term) for term in _own) + ")")

# One named group per category; the matching group names the category
_TERM_PATTERN = re.compile(r"\b(?:" + "|".join(_GROUPS) + r")\b", re.IGNORECASE)

MARKUP_TEMPLATE = '<span class="highlight-{category}">{text}</span>'


def tokenize(text):
    """
    Split text into (fragment, category) pairs.

    Unmatched fragments have category None. Joining the fragments gives
    back the original text.
    """
    segments = []
    position = 0
    for match in _TERM_PATTERN.finditer(text):
        if match.start() > position:
            segments.append((text[position:match.start()], None))
        segments.append((match.group(0), match.lastgroup))
        position = match.end()
    if position < len(text):
        segments.append((text[position:], None))
    return segments


def highlight_text(text):
    """Wrap every highlight term in category-tagged markup. Other text is left untouched."""
    return "".join(
        MARKUP_TEMPLATE.format(category=category, text=fragment) if category else fragment
        for fragment, category in tokenize(text)
    )


def highlight_html(text):
    """Like highlight_text, but HTML-escapes the document text so it is safe to embed."""
    return "".join(
        MARKUP_TEMPLATE.format(category=category, text=escape(fragment)) if category else str(escape(fragment))
        for fragment, category in tokenize(text)
    )


def count_highlights(text):
    counts = {category: 0 for category in HIGHLIGHT_TERMS}
    for _, category in tokenize(text):
        if category:
            counts[category] += 1
    return counts

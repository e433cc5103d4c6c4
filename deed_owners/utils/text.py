"""
Text normalization helpers shared by every owner-name component.

Owner fields scraped from appraiser pages carry runs of spaces, tabs and
non-breaking spaces. Everything downstream expects single-spaced text.
"""

import re

_WHITESPACE_RE = re.compile(r"[\s\u00a0]+")
# A word starts at its first letter or digit; leading punctuation is skipped
_WORD_RE = re.compile(r"\w\S*")


def clean_text(text: str | None) -> str:
    """Collapse whitespace (including NBSP) to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def title_case(text: str | None) -> str:
    """
    Title-case each whitespace-delimited word.

    The first letter is uppercased and the rest of the word lowered, so
    "O'BRIEN" becomes "O'brien", "SMITH-JONES" becomes "Smith-jones" and
    "(TR)" becomes "(Tr)".
    """
    if not text:
        return ""
    return _WORD_RE.sub(
        lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(),
        clean_text(text),
    )

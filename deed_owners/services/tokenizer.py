import re

from deed_owners.utils.text import clean_text

# Anything that cannot be part of a name token
_NON_NAME_CHARS_RE = re.compile(r"[^A-Za-z&'\-\s.]")
_LEADING_MARKER_RE = re.compile(r"^\*+")


def tokenize(fragment: str | None) -> list[str]:
    """
    Turn a name fragment into an ordered list of tokens.

    Appraiser exports prefix some owners with an asterisk marker; digits and
    other punctuation are noise. Token order is preserved because the rest of
    the parser reads fragments surname-first.
    """
    text = _LEADING_MARKER_RE.sub("", clean_text(fragment))
    text = _NON_NAME_CHARS_RE.sub(" ", text)
    return clean_text(text).split()

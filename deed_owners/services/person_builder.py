"""
Person builder.

Turns a surname-first token list (LAST FIRST [MIDDLE...]) into a Person.
"""

from typing import Optional, Sequence

from deed_owners.models.owner import Person
from deed_owners.utils.text import title_case

# Generational and professional suffixes dropped from middle names
NAME_SUFFIXES = frozenset({
    "jr", "sr",
    "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x",
    "md", "phd", "esq", "esquire",
})


def strip_suffixes(middle: Optional[str]) -> Optional[str]:
    """Remove suffix tokens from a middle name; None when nothing remains."""
    if not middle:
        return None
    kept = [token for token in middle.split() if token.lower() not in NAME_SUFFIXES]
    return " ".join(kept) or None


def build_person(tokens: Sequence[str], fallback_last_name: Optional[str] = None) -> Optional[Person]:
    """
    Build a Person from surname-first tokens.

    Args:
        tokens: Name tokens, surname first
        fallback_last_name: Surname carried over from an earlier owner, used
            when the fragment looks like "FIRST MIDDLE" with no surname

    Returns:
        Person, or None when there are fewer than two tokens
    """
    if len(tokens) < 2:
        # A single word cannot be split into first/last confidently
        return None

    last = tokens[0]
    first = tokens[1]
    middle = " ".join(tokens[2:]) or None

    # "ANN MARIE" after "SMITH JOHN &": continuation fragment without surname
    if fallback_last_name and len(tokens) == 2 and tokens[0] == tokens[0].upper():
        first = tokens[0]
        middle = tokens[1]
        last = fallback_last_name

    middle = strip_suffixes(middle)

    return Person(
        first_name=title_case(first),
        middle_name=title_case(middle) if middle else None,
        last_name=title_case(last),
    )

"""
Company indicator words for owner-name classification.

An owner fragment is a company when any of these appears in it as a whole
word. Matching is case-insensitive. Periods belong to a word ("N.A.",
"L.L.C.") and also separate its pieces ("INC.", "J.TR"). Extend by passing a
larger set, not by editing the matcher.
"""

import re
from typing import AbstractSet

from deed_owners.utils.text import clean_text

# Legal entity suffixes
ENTITY_SUFFIXES = {
    "inc", "llc", "l.l.c.", "ltd", "corp", "co", "company",
    "lp", "llp", "pllc",
}

# Banks and national associations
BANK_INDICATORS = {
    "bank", "n.a.", "na",
}

# Trusts (TR is the usual appraiser abbreviation for TRUST / TRUSTEE)
TRUST_INDICATORS = {
    "trust", "tr",
}

# Organizations and businesses without a legal suffix
ORGANIZATION_INDICATORS = {
    "foundation", "alliance", "solutions", "services", "associates",
    "partners", "enterprises", "properties", "holdings",
}

# Combine all into master set
COMPANY_INDICATORS = frozenset(
    ENTITY_SUFFIXES |
    BANK_INDICATORS |
    TRUST_INDICATORS |
    ORGANIZATION_INDICATORS
)

# Letters, digits and periods form a word; everything else separates words
_WORD_SPLIT_RE = re.compile(r"[^a-z0-9.]+")


def company_words(text: str) -> list[str]:
    """Split lowered, cleaned text into candidate indicator words."""
    return [word for word in _WORD_SPLIT_RE.split(clean_text(text).lower()) if word]


def is_company(text: str | None, indicators: AbstractSet[str] = COMPANY_INDICATORS) -> bool:
    """
    Check if an owner name fragment belongs to a company.

    Args:
        text: Raw owner name fragment
        indicators: Lowercase indicator words (defaults to COMPANY_INDICATORS)

    Returns:
        True if any indicator appears as a whole word
    """
    if not text:
        return False

    for word in company_words(text):
        if word in indicators:
            return True
        # "INC." / "CO." and indicators run into an initial, as in "J.TR"
        if any(piece in indicators for piece in word.split(".") if piece):
            return True

    return False

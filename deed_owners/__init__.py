"""Rule-based parser for owner names on property and deed records."""

from deed_owners.models.owner import Company, InvalidEntry, Owner, ParseResult, Person
from deed_owners.services import build_owner_history, dedupe_owners, owner_key, parse_owners

__all__ = [
    "Company",
    "InvalidEntry",
    "Owner",
    "ParseResult",
    "Person",
    "build_owner_history",
    "dedupe_owners",
    "owner_key",
    "parse_owners",
]

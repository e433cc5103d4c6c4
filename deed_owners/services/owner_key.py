"""
Canonical owner keys.

The key is the only equality rule for owners: the parser uses it to dedupe a
single result, and callers merging several results (current owners plus each
sale) must use it too.
"""

from typing import Iterable

from loguru import logger

from deed_owners.models.owner import Company, Owner, Person
from deed_owners.utils.text import clean_text


def owner_key(owner: Owner) -> str:
    """Return the lowercase equality key for an owner."""
    if isinstance(owner, Company):
        return clean_text(owner.name).lower()
    if isinstance(owner, Person):
        parts = [owner.first_name, owner.middle_name, owner.last_name]
        return " ".join(part.strip().lower() for part in parts if part and part.strip())
    return ""


def dedupe_owners(owners: Iterable[Owner]) -> list[Owner]:
    """Remove duplicate owners by key, keeping the first occurrence in order."""
    seen: set[str] = set()
    unique: list[Owner] = []
    total = 0

    for owner in owners:
        total += 1
        key = owner_key(owner)
        if not key or key in seen:
            continue
        seen.add(key)
        if isinstance(owner, Person) and owner.middle_name is not None and not owner.middle_name.strip():
            owner = owner.model_copy(update={"middle_name": None})
        unique.append(owner)

    if total > len(unique):
        logger.debug(f"Dropped {total - len(unique)} duplicate owner(s)")
    return unique

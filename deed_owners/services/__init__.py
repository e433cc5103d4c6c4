"""
Owner-name parsing services.

Modules:
- company_classifier: Company indicator words and detection
- tokenizer: Name fragment tokenization
- person_builder: Surname-first tokens to Person
- multi_person: Shared-surname and blind two-person splits
- owner_key: Owner equality keys and deduplication
- owner_parser: Top-level parse of an owner/grantee field
- owner_history: Per-property merge of current owners and sale grantees
"""

from deed_owners.services.owner_history import build_owner_history
from deed_owners.services.owner_key import dedupe_owners, owner_key
from deed_owners.services.owner_parser import parse_owners

__all__ = [
    "build_owner_history",
    "dedupe_owners",
    "owner_key",
    "parse_owners",
]

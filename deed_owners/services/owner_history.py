"""
Owner History - merges parsed owners for one property across its records.

A property contributes its current owner field plus one grantee field per
recorded sale. Each is parsed separately; the results are grouped by sale
date (ISO format, ascending) with the current owners under "current".
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, AbstractSet, Dict, List, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from deed_owners.config import CURRENT_OWNERS_KEY, PROPERTY_KEY_PREFIX, UNKNOWN_PROPERTY_ID
from deed_owners.exceptions import InvalidOwnerRecordError
from deed_owners.models.owner import InvalidEntry, Owner
from deed_owners.services.company_classifier import COMPANY_INDICATORS
from deed_owners.services.owner_key import dedupe_owners
from deed_owners.services.owner_parser import parse_owners
from deed_owners.utils.text import clean_text

# =============================================================================
# Input models
# =============================================================================

class Transaction(BaseModel):
    date: Optional[str] = None  # ISO YYYY-MM-DD after validation
    grantee: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Optional[str]:
        if not v:
            return None
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        # Appraiser sale tables use "08/27/2019"; already-normalized input passes through
        for fmt in ("%m/%d/%Y", "%Y-%m-%d"):
            try:
                return datetime.strptime(clean_text(str(v)), fmt).date().isoformat()
            except ValueError:
                continue
        return None


class PropertyOwnerRecord(BaseModel):
    property_id: Optional[str] = None
    current_owner: Optional[str] = None
    transactions: List[Transaction] = Field(default_factory=list)

    @field_validator("property_id", mode="before")
    @classmethod
    def coerce_property_id(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return clean_text(str(v)) or None


# =============================================================================
# Output model
# =============================================================================

class OwnerHistory(BaseModel):
    property_id: str = UNKNOWN_PROPERTY_ID
    owners_by_date: Dict[str, List[Owner]] = Field(default_factory=dict)
    invalid_owners: List[InvalidEntry] = Field(default_factory=list)

    @property
    def property_key(self) -> str:
        return f"{PROPERTY_KEY_PREFIX}{self.property_id}"

    def to_output(self) -> dict[str, Any]:
        """Return the JSON-ready ``{"property_<id>": {...}}`` mapping."""
        return {
            self.property_key: self.model_dump(
                mode="json", include={"owners_by_date", "invalid_owners"}
            )
        }


# =============================================================================
# Aggregation
# =============================================================================

def build_owner_history(
    record: Union[PropertyOwnerRecord, Mapping[str, Any]],
    *,
    company_indicators: AbstractSet[str] = COMPANY_INDICATORS,
) -> OwnerHistory:
    """
    Parse and merge the owner fields of one property.

    Args:
        record: PropertyOwnerRecord or a mapping with property_id,
            current_owner and transactions [{date, grantee}]
        company_indicators: Indicator words for the company check

    Returns:
        OwnerHistory with dated owners ascending and "current" last

    Raises:
        InvalidOwnerRecordError: record does not have the expected shape
    """
    if not isinstance(record, PropertyOwnerRecord):
        if not isinstance(record, Mapping):
            raise InvalidOwnerRecordError(
                f"Property record must be a mapping, got {type(record).__name__}"
            )
        try:
            record = PropertyOwnerRecord.model_validate(dict(record))
        except ValidationError as e:
            raise InvalidOwnerRecordError(f"Invalid property record: {e}") from e

    property_id = record.property_id or UNKNOWN_PROPERTY_ID
    log = logger.bind(property_id=property_id)

    current = parse_owners(record.current_owner, company_indicators=company_indicators)
    invalid_owners: list[InvalidEntry] = list(current.invalids)
    dated: dict[str, list[Owner]] = {}

    for idx, txn in enumerate(record.transactions):
        grantee = clean_text(txn.grantee)
        if not txn.date:
            log.warning(f"Skipping transaction #{idx}: missing or unparseable date")
            continue
        if not grantee:
            log.warning(f"Skipping transaction #{idx} ({txn.date}): empty grantee")
            continue

        parsed = parse_owners(grantee, company_indicators=company_indicators)
        dated.setdefault(txn.date, []).extend(parsed.owners)
        invalid_owners.extend(parsed.invalids)

    owners_by_date: dict[str, list[Owner]] = {
        sale_date: dedupe_owners(dated[sale_date]) for sale_date in sorted(dated)
    }
    owners_by_date[CURRENT_OWNERS_KEY] = dedupe_owners(current.owners)

    log.debug(
        f"Owner history: {len(dated)} dated record(s), "
        f"{len(owners_by_date[CURRENT_OWNERS_KEY])} current owner(s), "
        f"{len(invalid_owners)} invalid"
    )

    return OwnerHistory(
        property_id=property_id,
        owners_by_date=owners_by_date,
        invalid_owners=invalid_owners,
    )

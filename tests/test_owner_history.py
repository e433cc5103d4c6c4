from datetime import date

import pytest

from deed_owners.exceptions import InvalidOwnerRecordError
from deed_owners.models.owner import Company, Person
from deed_owners.services.owner_history import (
    PropertyOwnerRecord,
    Transaction,
    build_owner_history,
)


def _record() -> dict:
    return {
        "property_id": "00017-010-008",
        "current_owner": "SMITH JOHN & MARY",
        "transactions": [
            {"date": "03/15/2010", "grantee": "DOE JANE"},
            {"date": "1/2/2005", "grantee": "ACME LLC"},
            {"date": "not a date", "grantee": "ROE ALAN"},
            {"date": "03/15/2010", "grantee": "DOE JANE & BOB"},
            {"date": "04/01/2012", "grantee": "   "},
            {"date": "06/01/2015", "grantee": "SMITH"},
        ],
    }


def test_transaction_date_normalized_to_iso() -> None:
    assert Transaction(date="8/27/2019").date == "2019-08-27"
    assert Transaction(date="2019-08-27").date == "2019-08-27"
    assert Transaction(date=date(2019, 8, 27)).date == "2019-08-27"
    assert Transaction(date="13/45/2019").date is None
    assert Transaction(date="").date is None


def test_history_dates_sorted_with_current_last() -> None:
    history = build_owner_history(_record())

    assert list(history.owners_by_date) == ["2005-01-02", "2010-03-15", "2015-06-01", "current"]
    assert history.owners_by_date["2005-01-02"] == [Company(name="Acme Llc")]
    assert history.owners_by_date["2015-06-01"] == []
    assert history.owners_by_date["current"] == [
        Person(first_name="John", last_name="Smith"),
        Person(first_name="Mary", last_name="Smith"),
    ]


def test_history_merges_same_date_without_duplicates() -> None:
    history = build_owner_history(_record())

    assert history.owners_by_date["2010-03-15"] == [
        Person(first_name="Jane", last_name="Doe"),
        Person(first_name="Bob", last_name="Doe"),
    ]


def test_history_skips_bad_rows_and_collects_invalids() -> None:
    history = build_owner_history(_record())

    assert [inv.raw for inv in history.invalid_owners] == ["SMITH"]
    assert "2012-04-01" not in history.owners_by_date


def test_history_current_invalids_come_first() -> None:
    history = build_owner_history(
        {
            "current_owner": "JONES",
            "transactions": [{"date": "01/01/2000", "grantee": "DOE"}],
        }
    )

    assert [inv.raw for inv in history.invalid_owners] == ["JONES", "DOE"]


def test_history_defaults_unknown_property_id() -> None:
    history = build_owner_history({"property_id": "  ", "current_owner": "SMITH JOHN"})

    assert history.property_id == "unknown_id"
    assert history.property_key == "property_unknown_id"


def test_history_accepts_record_model() -> None:
    record = PropertyOwnerRecord(property_id=123, current_owner="ACME LLC")
    history = build_owner_history(record)

    assert history.property_id == "123"
    assert history.owners_by_date == {"current": [Company(name="Acme Llc")]}


def test_history_to_output_shape() -> None:
    output = build_owner_history(_record()).to_output()

    assert list(output) == ["property_00017-010-008"]
    body = output["property_00017-010-008"]
    assert set(body) == {"owners_by_date", "invalid_owners"}
    assert body["owners_by_date"]["2005-01-02"] == [{"type": "company", "name": "Acme Llc"}]
    assert body["invalid_owners"] == [
        {"raw": "SMITH", "reason": "ambiguous_or_incomplete_person_name"}
    ]


def test_history_rejects_non_mapping() -> None:
    with pytest.raises(InvalidOwnerRecordError):
        build_owner_history(["SMITH JOHN"])  # type: ignore[arg-type]


def test_history_rejects_bad_transactions() -> None:
    with pytest.raises(InvalidOwnerRecordError, match="Invalid property record"):
        build_owner_history({"current_owner": "SMITH JOHN", "transactions": "03/15/2010"})

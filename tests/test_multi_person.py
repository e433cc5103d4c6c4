from deed_owners.services.multi_person import split_blind, split_shared_surname


def test_split_shared_surname_pairs_given_names() -> None:
    people = split_shared_surname(["SMITH", "JOHN", "ROBERT", "ANN", "MARIE"])

    assert [(p.first_name, p.middle_name, p.last_name) for p in people] == [
        ("John", "Robert", "Smith"),
        ("Ann", "Marie", "Smith"),
    ]


def test_split_shared_surname_trailing_single_first_name() -> None:
    people = split_shared_surname(["SMITH", "JOHN", "ROBERT", "ANN"])

    assert [(p.first_name, p.middle_name, p.last_name) for p in people] == [
        ("John", "Robert", "Smith"),
        ("Ann", None, "Smith"),
    ]


def test_split_shared_surname_three_people() -> None:
    people = split_shared_surname(["LEE", "AMY", "B", "TOM", "C", "SUE"])
    assert [p.first_name for p in people] == ["Amy", "Tom", "Sue"]
    assert {p.last_name for p in people} == {"Lee"}


def test_split_shared_surname_below_four_tokens() -> None:
    assert split_shared_surname(["SMITH", "JOHN", "A"]) == []
    assert split_shared_surname([]) == []


def test_split_blind_emits_two_people() -> None:
    pair = split_blind(["SMITH", "JOHN", "A", "JONES", "MARY"])
    assert pair is not None
    assert len(pair) == 2


def test_split_blind_second_person_borrows_surname() -> None:
    pair = split_blind(["SMITH", "JOHN", "A", "MARY", "ANN"])
    assert pair is not None
    assert pair[1].last_name == "Smith"


def test_split_blind_single_trailing_token_fails() -> None:
    assert split_blind(["SMITH", "JOHN", "A", "MARY"]) is None


def test_split_blind_needs_four_tokens() -> None:
    assert split_blind(["SMITH", "JOHN", "A"]) is None

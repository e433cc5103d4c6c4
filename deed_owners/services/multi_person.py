"""
Splitting of single fragments that encode several people.

Deed records often list a household as one surname followed by several
given names: "SMITH JOHN ROBERT ANN MARIE" is John Robert Smith and
Ann Marie Smith.
"""

from typing import Optional, Sequence, Tuple

from deed_owners.config import MIN_SHARED_SURNAME_TOKENS
from deed_owners.models.owner import Person
from deed_owners.services.person_builder import build_person


def split_shared_surname(tokens: Sequence[str]) -> list[Person]:
    """
    Split LAST FIRST1 [MIDDLE1] FIRST2 [MIDDLE2] ... into people sharing LAST.

    Given names are consumed two at a time (first + middle); a trailing single
    token becomes a first name on its own.
    """
    if len(tokens) < MIN_SHARED_SURNAME_TOKENS:
        return []

    last = tokens[0]
    remaining = list(tokens[1:])
    people: list[Person] = []

    i = 0
    while i < len(remaining):
        chunk = remaining[i:i + 2]
        person = build_person([last, *chunk])
        if person:
            people.append(person)
        i += len(chunk)

    return people


def split_blind(tokens: Sequence[str]) -> Optional[Tuple[Person, Person]]:
    """
    Best-effort split of a fragment that looks like two people mashed together.

    The first three tokens become LAST FIRST MIDDLE, the rest a second person
    whose surname falls back to the first token. Boundaries are a guess; names
    with multi-word middle names or compound surnames can be cut wrongly.
    """
    if len(tokens) < MIN_SHARED_SURNAME_TOKENS:
        return None

    last = tokens[0]
    first_person = build_person(tokens[:3])
    second_person = build_person(tokens[3:], last)
    if first_person and second_person:
        return first_person, second_person
    return None

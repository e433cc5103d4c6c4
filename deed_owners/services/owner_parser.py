"""
Owner Parser - turns a raw owner-name field into classified owners.

Input is the text of an appraiser "owner name" field or a sale "grantee"
field, for example:

    SMITH JOHN & MARY, ACME HOLDINGS LLC
    SMITH JOHN ROBERT ANN MARIE
    DOE JANE E, MARY

Rules, applied per comma-separated segment:
1. Company indicator anywhere in the segment -> one Company.
2. Otherwise split on "&" / "AND". A lone sub-part with 4+ tokens is a
   household sharing one surname.
3. Each sub-part is read surname-first. Later sub-parts without a surname
   borrow it from the first sub-part (or from the previous segment).
4. Anything that still cannot be split becomes an InvalidEntry.

Owners are deduplicated by owner_key; invalid entries are kept as-is.
The parser never raises.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import partial, reduce
from typing import AbstractSet, Optional, Sequence

from loguru import logger

from deed_owners.config import INVALID_PERSON_REASON, MIN_SHARED_SURNAME_TOKENS
from deed_owners.models.owner import Company, InvalidEntry, Owner, ParseResult
from deed_owners.services.company_classifier import COMPANY_INDICATORS, is_company
from deed_owners.services.multi_person import split_blind, split_shared_surname
from deed_owners.services.owner_key import dedupe_owners
from deed_owners.services.person_builder import build_person
from deed_owners.services.tokenizer import tokenize
from deed_owners.utils.text import clean_text, title_case

_LEADING_MARKER_RE = re.compile(r"^\*")
_SEGMENT_SPLIT_RE = re.compile(r"\s*,\s*")
_CONJUNCTION_SPLIT_RE = re.compile(r"\s*(?:&|\band\b)\s*", re.IGNORECASE)


class OutcomeKind(str, Enum):
    COMPANY = "company"
    PERSON = "person"
    SHARED_SURNAME = "shared_surname"
    BLIND_SPLIT = "blind_split"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class FragmentOutcome:
    """Decision for one fragment (a whole segment or one sub-part of it)."""

    kind: OutcomeKind
    raw: str
    owners: tuple[Owner, ...] = ()
    surname: Optional[str] = None  # new running surname; None leaves it unchanged


@dataclass(frozen=True)
class _ParseState:
    owners: tuple[Owner, ...] = ()
    invalids: tuple[InvalidEntry, ...] = ()
    surname: Optional[str] = None


def split_segments(text: str) -> list[str]:
    """Split owner text on commas, dropping blank segments."""
    return [segment for segment in _SEGMENT_SPLIT_RE.split(text) if segment]


def split_conjunctions(segment: str) -> list[str]:
    """Split a segment on '&' or the standalone word 'and'."""
    return [part for part in _CONJUNCTION_SPLIT_RE.split(segment) if part]


def resolve_name_part(
    part: str,
    tokens: Sequence[str],
    fallback_last_name: Optional[str],
) -> FragmentOutcome:
    """Classify one tokenized sub-part as a person, a blind split pair or ambiguous."""
    if len(tokens) == 1 and fallback_last_name:
        # "MARY" in "SMITH JOHN & MARY": a given name continuing the household
        person = build_person([fallback_last_name, tokens[0]])
    else:
        person = build_person(tokens, fallback_last_name)
    if person:
        return FragmentOutcome(
            OutcomeKind.PERSON, part, (person,), person.last_name.upper()
        )

    if len(tokens) >= MIN_SHARED_SURNAME_TOKENS:
        pair = split_blind(tokens)
        if pair:
            return FragmentOutcome(OutcomeKind.BLIND_SPLIT, part, pair, tokens[0].upper())

    return FragmentOutcome(OutcomeKind.AMBIGUOUS, part)


def resolve_segment(
    segment: str,
    running_surname: Optional[str],
    company_indicators: AbstractSet[str] = COMPANY_INDICATORS,
) -> list[FragmentOutcome]:
    """
    Resolve one comma-separated segment into fragment outcomes.

    Args:
        segment: Segment text
        running_surname: Uppercased surname of the last owner seen in earlier segments
        company_indicators: Indicator words for the company check

    Returns:
        Outcomes in input order (possibly empty)
    """
    seg = _LEADING_MARKER_RE.sub("", clean_text(segment)).strip()
    if not seg:
        return []

    if is_company(seg, company_indicators):
        return [FragmentOutcome(OutcomeKind.COMPANY, seg, (Company(name=title_case(seg)),))]

    parts = split_conjunctions(seg)

    if len(parts) == 1:
        tokens = tokenize(parts[0])
        if len(tokens) >= MIN_SHARED_SURNAME_TOKENS:
            people = split_shared_surname(tokens)
            if len(people) >= 2:
                return [
                    FragmentOutcome(
                        OutcomeKind.SHARED_SURNAME, parts[0], tuple(people), tokens[0].upper()
                    )
                ]

    outcomes: list[FragmentOutcome] = []
    local_surname: Optional[str] = None
    surname = running_surname

    for idx, part in enumerate(parts):
        tokens = tokenize(part)
        if not tokens:
            continue

        if idx == 0:
            local_surname = tokens[0]
            fallback = surname if len(tokens) < 2 else None
        else:
            fallback = local_surname or surname

        outcome = resolve_name_part(part, tokens, fallback)
        if outcome.surname:
            surname = outcome.surname
        outcomes.append(outcome)

    return outcomes


def _apply_outcome(state: _ParseState, outcome: FragmentOutcome) -> _ParseState:
    if outcome.kind is OutcomeKind.AMBIGUOUS:
        logger.debug(f"Unresolved owner fragment: {outcome.raw!r}")
        invalid = InvalidEntry(raw=outcome.raw, reason=INVALID_PERSON_REASON)
        return _ParseState(state.owners, state.invalids + (invalid,), state.surname)

    return _ParseState(
        state.owners + outcome.owners,
        state.invalids,
        outcome.surname or state.surname,
    )


def _fold_segment(
    company_indicators: AbstractSet[str],
    state: _ParseState,
    segment: str,
) -> _ParseState:
    return reduce(
        _apply_outcome,
        resolve_segment(segment, state.surname, company_indicators),
        state,
    )


def parse_owners(
    raw_text: Optional[str],
    *,
    company_indicators: AbstractSet[str] = COMPANY_INDICATORS,
) -> ParseResult:
    """
    Parse a raw owner-name field into deduplicated owners and invalid fragments.

    Args:
        raw_text: Owner or grantee field text (None/blank yields an empty result)
        company_indicators: Indicator words for the company check

    Returns:
        ParseResult with owners in first-seen order and every unresolved fragment
    """
    text = _LEADING_MARKER_RE.sub("", clean_text(raw_text)).strip()
    if not text:
        return ParseResult()

    state = reduce(partial(_fold_segment, company_indicators), split_segments(text), _ParseState())

    owners = dedupe_owners(state.owners)
    logger.debug(
        f"Parsed {text!r}: {len(owners)} owner(s), {len(state.invalids)} invalid fragment(s)"
    )
    return ParseResult(owners=owners, invalids=list(state.invalids))

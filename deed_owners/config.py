"""
deed_owners configuration.

Parsing constants live here so the orchestrator, the history aggregator and
the CLI agree on them. Runtime knobs come from the environment (a local
``.env`` is honoured).
"""

import os

from dotenv import load_dotenv

# Reason code attached to every fragment that cannot be split into a person
INVALID_PERSON_REASON = "ambiguous_or_incomplete_person_name"

# Owner history output
UNKNOWN_PROPERTY_ID = "unknown_id"
CURRENT_OWNERS_KEY = "current"
PROPERTY_KEY_PREFIX = "property_"

# A single surname-first fragment needs at least LAST FIRST1 MIDDLE1 FIRST2
# before it is treated as several people sharing one surname
MIN_SHARED_SURNAME_TOKENS = 4

# Extra company indicators, comma separated (e.g. "church,ministries")
EXTRA_INDICATORS_ENV = "DEED_OWNERS_EXTRA_INDICATORS"


def extra_company_indicators(env_var: str = EXTRA_INDICATORS_ENV) -> frozenset[str]:
    """Return additional company indicator words configured via env."""
    load_dotenv()
    raw = os.getenv(env_var) or ""
    return frozenset(word.strip().lower() for word in raw.split(",") if word.strip())

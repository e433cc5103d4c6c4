from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from deed_owners.config import INVALID_PERSON_REASON


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["person"] = "person"
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    middle_name: Optional[str] = None


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["company"] = "company"
    name: str = Field(min_length=1)


Owner = Annotated[Union[Person, Company], Field(discriminator="type")]


class InvalidEntry(BaseModel):
    """A name fragment the heuristics could not resolve, kept for manual review."""

    model_config = ConfigDict(frozen=True)

    raw: str
    reason: str = INVALID_PERSON_REASON


class ParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    owners: List[Owner] = Field(default_factory=list)
    invalids: List[InvalidEntry] = Field(default_factory=list)

# This project was developed with assistance from AI tools.
"""Shared schema components."""

import re
from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class CamelModel(BaseModel):
    """Immutable record serialized with camelCase keys.

    Python code constructs records with snake_case names; JSON input and
    output use the camelCase aliases. Non-finite floats are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )


def _check_iso_date(value: str) -> str:
    if not _ISO_DATE_PATTERN.match(value):
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
    date.fromisoformat(value)
    return value


# Kept as the caller's string so results echo it untouched.
IsoDate = Annotated[str, AfterValidator(_check_iso_date)]


def _compact_number(value: float) -> int | float:
    if float(value).is_integer():
        return int(value)
    return value


# Whole amounts serialize as JSON integers (35, not 35.0).
Number = Annotated[float, PlainSerializer(_compact_number, when_used="json")]

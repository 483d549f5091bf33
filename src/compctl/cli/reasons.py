# This project was developed with assistance from AI tools.
"""Reason-code resolution for the adverse-action commands."""

import re

from ..services.compliance.catalog import AdverseActionCatalog

# ASCII digits only; int() alone would also take "+3", "1_0" and non-ASCII digits.
_CODE_PATTERN = re.compile(r"^[0-9]+$")


def resolve_reasons(raw: str | None, catalog: AdverseActionCatalog) -> list[str]:
    """Expand a comma-separated list of reason codes and free text.

    A token made only of the digits 0-9 and within the catalog's range
    becomes the matching standard phrase; anything else is kept verbatim.
    Empty tokens are dropped.
    """
    if not raw:
        return []

    reasons: list[str] = []
    for part in raw.split(","):
        token = part.strip()
        if not token:
            continue
        phrase = None
        if _CODE_PATTERN.match(token):
            phrase = catalog.reason_for_code(int(token))
        reasons.append(phrase or token)
    return reasons

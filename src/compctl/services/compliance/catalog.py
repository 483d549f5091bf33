# This project was developed with assistance from AI tools.
"""Adverse-action catalog loader.

Reads the packaged data/adverse_action.yaml, validates its structure, and
caches the result with mtime-based reload so wording updates take effect
without touching evaluation code. The catalog always holds exactly 16
reasons and both statutory notices.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "adverse_action.yaml"
_cached_catalog: "AdverseActionCatalog | None" = None
_cached_path: Path | None = None
_cached_mtime: float = 0.0

REQUIRED_NOTICES = {"ecoa", "fcra"}
REQUIRED_REASON_COUNT = 16


class AdverseActionCatalog(BaseModel):
    """Versioned reason phrases and statutory notice texts."""

    model_config = ConfigDict(frozen=True)

    version: str
    reasons: tuple[str, ...]
    ecoa_notice: str
    fcra_notice: str

    def reason_for_code(self, code: int) -> str | None:
        """Return the phrase for a 1-based reason code, or None if out of range."""
        if 1 <= code <= len(self.reasons):
            return self.reasons[code - 1]
        return None


def _validate_catalog(raw: Any) -> None:
    """Validate the parsed YAML tree before building the model."""
    if not isinstance(raw, dict):
        raise ValueError("adverse_action.yaml must be a mapping")

    if not raw.get("version"):
        raise ValueError("adverse_action.yaml must contain a 'version'")

    reasons = raw.get("reasons")
    if not reasons or not isinstance(reasons, list):
        raise ValueError("adverse_action.yaml must contain a non-empty 'reasons' list")
    if len(reasons) != REQUIRED_REASON_COUNT:
        raise ValueError(
            f"adverse_action.yaml must list exactly {REQUIRED_REASON_COUNT} reasons, "
            f"found {len(reasons)}"
        )
    for i, reason in enumerate(reasons, start=1):
        if not isinstance(reason, str) or not reason.strip():
            raise ValueError(f"Reason #{i} must be a non-empty string")

    notices = raw.get("notices")
    if not notices or not isinstance(notices, dict):
        raise ValueError("adverse_action.yaml must contain a 'notices' section")
    missing = REQUIRED_NOTICES - set(notices.keys())
    if missing:
        raise ValueError(f"'notices' is missing required texts: {sorted(missing)}")


def _resolve_path(path: Path | None) -> Path:
    return path if path is not None else _DEFAULT_CATALOG_PATH


def load_catalog(path: Path | None = None) -> AdverseActionCatalog:
    """Load and validate the catalog from disk."""
    catalog_path = _resolve_path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Adverse-action catalog not found: {catalog_path}")

    try:
        raw = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"adverse_action.yaml is not valid YAML: {exc}") from exc
    _validate_catalog(raw)
    return AdverseActionCatalog(
        version=str(raw["version"]),
        reasons=tuple(raw["reasons"]),
        ecoa_notice=raw["notices"]["ecoa"],
        fcra_notice=raw["notices"]["fcra"],
    )


def get_catalog(path: Path | None = None) -> AdverseActionCatalog:
    """Return the cached catalog, reloading if the file or its mtime changed."""
    global _cached_catalog, _cached_path, _cached_mtime  # noqa: PLW0603
    catalog_path = _resolve_path(path)

    try:
        current_mtime = catalog_path.stat().st_mtime
    except FileNotFoundError:
        if _cached_catalog is not None and _cached_path == catalog_path:
            logger.warning("Catalog file disappeared, using cached catalog")
            return _cached_catalog
        raise FileNotFoundError(f"Adverse-action catalog not found: {catalog_path}") from None

    if (
        _cached_catalog is None
        or _cached_path != catalog_path
        or current_mtime > _cached_mtime
    ):
        logger.info("Loading adverse-action catalog from %s", catalog_path)
        _cached_catalog = load_catalog(catalog_path)
        _cached_path = catalog_path
        _cached_mtime = current_mtime

    return _cached_catalog

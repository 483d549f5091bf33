# This project was developed with assistance from AI tools.
"""Tests for adverse-action catalog loading, validation and reload."""

import os
import textwrap
from pathlib import Path

import pytest

from compctl.services.compliance import catalog as catalog_mod
from compctl.services.compliance.catalog import get_catalog, load_catalog


SIXTEEN_REASONS = tuple(f"Reason {i}" for i in range(1, 17))


def _write_catalog(tmp_path: Path, reasons=SIXTEEN_REASONS) -> Path:
    cfg = tmp_path / "adverse_action.yaml"
    reason_lines = "\n".join(f"  - {r}" for r in reasons)
    cfg.write_text(
        "version: test-1\n"
        "reasons:\n"
        f"{reason_lines}\n"
        "notices:\n"
        "  ecoa: ECOA text\n"
        "  fcra: FCRA text\n"
    )
    return cfg


# -- Packaged catalog --


def test_packaged_catalog_has_sixteen_reasons():
    catalog = load_catalog()
    assert len(catalog.reasons) == 16
    assert catalog.reasons[0] == "Credit score does not meet minimum requirements"
    assert catalog.reasons[-1] == "Temporary or irregular employment"
    assert catalog.version


def test_packaged_notices_are_single_paragraphs():
    catalog = load_catalog()
    assert catalog.ecoa_notice.startswith(
        "The federal Equal Credit Opportunity Act prohibits creditors"
    )
    assert catalog.ecoa_notice.endswith("Washington, DC 20552.")
    assert "applicant's income" in catalog.ecoa_notice
    assert "\n" not in catalog.ecoa_notice
    assert catalog.fcra_notice.startswith("You have the right to obtain a free copy")
    assert "\n" not in catalog.fcra_notice


def test_reason_for_code_range():
    catalog = load_catalog()
    assert catalog.reason_for_code(2) == "Debt-to-income ratio exceeds guidelines"
    assert catalog.reason_for_code(16) == "Temporary or irregular employment"
    assert catalog.reason_for_code(0) is None
    assert catalog.reason_for_code(17) is None


# -- Validation --


def test_load_custom_catalog(tmp_path):
    catalog = load_catalog(_write_catalog(tmp_path))
    assert catalog.version == "test-1"
    assert catalog.reasons == SIXTEEN_REASONS
    assert catalog.ecoa_notice == "ECOA text"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_catalog(tmp_path / "nope.yaml")


def test_rejects_missing_reasons(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(
        textwrap.dedent("""\
        version: x
        notices:
          ecoa: a
          fcra: b
        """)
    )
    with pytest.raises(ValueError, match="reasons"):
        load_catalog(cfg)


def test_rejects_short_reason_list(tmp_path):
    with pytest.raises(ValueError, match="exactly 16 reasons, found 15"):
        load_catalog(_write_catalog(tmp_path, reasons=SIXTEEN_REASONS[:15]))


def test_rejects_long_reason_list(tmp_path):
    with pytest.raises(ValueError, match="exactly 16 reasons, found 17"):
        load_catalog(_write_catalog(tmp_path, reasons=SIXTEEN_REASONS + ("Extra",)))


def test_rejects_invalid_yaml(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("version: [unclosed\n")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_catalog(cfg)


def test_rejects_blank_reason(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(
        textwrap.dedent("""\
        version: x
        reasons: [a, "", c, d, e, f, g, h, i, j, k, l, m, n, o, p]
        notices:
          ecoa: a
          fcra: b
        """)
    )
    with pytest.raises(ValueError, match="Reason #2"):
        load_catalog(cfg)


def test_rejects_missing_notice(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(
        textwrap.dedent("""\
        version: x
        reasons: [a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p]
        notices:
          ecoa: a
        """)
    )
    with pytest.raises(ValueError, match="fcra"):
        load_catalog(cfg)


def test_rejects_non_mapping(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="mapping"):
        load_catalog(cfg)


# -- Caching --


def test_get_catalog_caches(tmp_path):
    cfg = _write_catalog(tmp_path)
    assert get_catalog(cfg) is get_catalog(cfg)


def test_get_catalog_reloads_on_mtime_change(tmp_path):
    cfg = _write_catalog(tmp_path)
    first = get_catalog(cfg)

    changed = ("Changed",) + SIXTEEN_REASONS[1:]
    _write_catalog(tmp_path, reasons=changed)
    stat = cfg.stat()
    os.utime(cfg, (stat.st_atime, stat.st_mtime + 10))

    second = get_catalog(cfg)
    assert second is not first
    assert second.reasons == changed


def test_get_catalog_keeps_cache_when_file_disappears(tmp_path):
    cfg = _write_catalog(tmp_path)
    first = get_catalog(cfg)
    cfg.unlink()
    assert get_catalog(cfg) is first


def test_get_catalog_defaults_to_packaged_file(tmp_path, monkeypatch):
    cfg = _write_catalog(tmp_path)
    monkeypatch.setattr(catalog_mod, "_DEFAULT_CATALOG_PATH", cfg)
    assert get_catalog().reasons == SIXTEEN_REASONS

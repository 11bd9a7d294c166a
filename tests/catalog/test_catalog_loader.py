from __future__ import annotations

import pytest

from spicerack.catalog import catalog_file, load_catalog, submit_spice
from spicerack.errors import InvalidNameError


def test_bundled_catalog_is_used_when_no_file_exists():
    assert not catalog_file().exists()

    spices = load_catalog()

    names = {spice.name for spice in spices}
    assert {"Cinnamon", "Oregano", "Pepper, Black"} <= names
    assert all(len(spice.category) == 1 for spice in spices)


def test_explicit_catalog_path(tmp_path):
    path = tmp_path / "mine.md"
    path.write_text("S\nSaffron\n", encoding="utf-8")

    assert [spice.name for spice in load_catalog(path)] == ["Saffron"]


def test_catalog_path_setting(tmp_path, monkeypatch):
    from spicerack.config import get_settings

    path = tmp_path / "configured.md"
    path.write_text("T\nTarragon\n", encoding="utf-8")
    monkeypatch.setenv("SPICERACK_CATALOG_PATH", str(path))
    get_settings.cache_clear()

    assert catalog_file() == path
    assert [spice.name for spice in load_catalog()] == ["Tarragon"]


def test_submit_new_spice_writes_catalog_copy():
    assert submit_spice("smoked ghost pepper") == "approved"

    assert catalog_file().exists()
    spices = load_catalog()
    assert ("Smoked Ghost Pepper", "S") in [(spice.name, spice.category) for spice in spices]
    assert "Cinnamon" in {spice.name for spice in spices}


def test_submit_respects_explicit_category():
    assert submit_spice("kala namak", "b") == "approved"

    assert ("Kala Namak", "B") in [(spice.name, spice.category) for spice in load_catalog()]


def test_submit_existing_spice_is_a_noop():
    assert submit_spice("cinnamon") == "exists"
    assert submit_spice("pepper") == "exists"
    assert not catalog_file().exists()


@pytest.mark.parametrize("name", ["", "  ", "99"])
def test_submit_rejects_invalid_names(name):
    with pytest.raises(InvalidNameError):
        submit_spice(name)

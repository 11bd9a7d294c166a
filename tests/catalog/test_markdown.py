from __future__ import annotations

from spicerack.catalog import contains_spice, insert_spice, matches_catalog_name, parse_spice_list

CATALOG = """---
title: Spice List
---

# Spice List by Letter

A
Allspice
Anise

C
Cinnamon

P
Pepper, Black
"""


def test_parse_spice_list_tags_sections():
    spices = parse_spice_list(CATALOG)

    assert [(spice.name, spice.category) for spice in spices] == [
        ("Allspice", "A"),
        ("Anise", "A"),
        ("Cinnamon", "C"),
        ("Pepper, Black", "P"),
    ]


def test_parse_without_front_matter():
    spices = parse_spice_list("B\nBasil\n\nBay Leaves\n")

    assert [spice.name for spice in spices] == ["Basil", "Bay Leaves"]
    assert {spice.category for spice in spices} == {"B"}


def test_matches_comma_qualified_names():
    assert matches_catalog_name("Pepper, Black", "Pepper")
    assert matches_catalog_name("  Cinnamon ", "Cinnamon")
    assert not matches_catalog_name("Peppercorns, Pink", "Pepper")
    assert not matches_catalog_name("Cinnamon", "Cinna")


def test_contains_spice():
    assert contains_spice(CATALOG, "Anise")
    assert contains_spice(CATALOG, "Pepper")
    assert not contains_spice(CATALOG, "Sumac")


def test_insert_under_existing_heading():
    updated = insert_spice(CATALOG, "Cassia", "c")

    assert "C\nCassia\nCinnamon" in updated
    assert ("Cassia", "C") in [(spice.name, spice.category) for spice in parse_spice_list(updated)]


def test_insert_appends_missing_section():
    updated = insert_spice(CATALOG, "Sumac", "S")

    assert updated.endswith("\n\nS\nSumac")
    assert parse_spice_list(updated)[-1].category == "S"

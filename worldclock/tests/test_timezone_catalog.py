"""TimezoneCatalog ordering and system lookup."""
from __future__ import annotations

from worldclock.logic.timezone_catalog import TimezoneCatalog


def test_sorted_and_unique() -> None:
    catalog = TimezoneCatalog(["UTC", "Asia/Tokyo", "UTC", "Africa/Abidjan"])
    assert catalog.ids == ("Africa/Abidjan", "Asia/Tokyo", "UTC")
    assert len(catalog) == 3
    assert list(catalog) == list(catalog.ids)


def test_membership() -> None:
    catalog = TimezoneCatalog(["UTC"])
    assert "UTC" in catalog
    assert "Europe/London" not in catalog


def test_system_catalog_contains_utc_and_common_zones() -> None:
    catalog = TimezoneCatalog.from_system()
    assert "UTC" in catalog
    assert "Europe/London" in catalog
    assert "localtime" not in catalog
    assert list(catalog.ids) == sorted(catalog.ids)

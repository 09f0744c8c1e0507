"""
Integration tests against the full reference SATCAT document.

Skipped unless data/satcat.json is present
(python scripts/download_satcat.py --url <satcat json url>).
"""

import pytest
from pathlib import Path

from satcat.catalog import SatCat

SATCAT_PATH = Path("data/satcat.json")


@pytest.fixture(scope="module")
def satcat():
    if not SATCAT_PATH.exists():
        pytest.skip("data/satcat.json not found")
    return SatCat.from_json(SATCAT_PATH)


class TestReferenceLoad:
    def test_record_count(self, satcat):
        assert len(satcat) == 58534

    def test_first_record(self, satcat):
        assert satcat[0].satname == "SL-1 R/B"


class TestReferenceFilters:
    def test_filter_by_types(self, satcat):
        assert len(satcat.filter_by_types(["PAYLOAD", "ROCKET BODY"])) == 23178

    def test_filter_by_name_pattern(self, satcat):
        assert len(satcat.filter_by_name_pattern("STARLINK")) == 5545

    def test_filter_by_launch_years(self, satcat):
        assert len(satcat.filter_by_launch_years([2019, 2020])) == 2219

    def test_filter_by_launch_year_range(self, satcat):
        assert len(satcat.filter_by_launch_year_range(2019, 2020)) == 2219

    def test_filter_by_country_codes(self, satcat):
        filtered = satcat.filter_by_country_codes(["US", "CA"])
        assert len(filtered) == 20450
        assert len(filtered.filter_by_country_codes(["US"])) == 20349
        assert len(filtered.filter_by_country_codes(["CA"])) == 101

    def test_filter_by_max_perigee(self, satcat):
        assert len(satcat.filter_by_max_perigee(500)) == 32466

    def test_filter_by_min_apogee(self, satcat):
        assert len(satcat.filter_by_min_apogee(500)) == 31031

    def test_filter_by_norad_ids(self, satcat):
        filtered = satcat.filter_by_norad_ids(["25544", "40000"])
        assert len(filtered) == 2
        assert filtered[0].satname == "ISS (ZARYA)"
        assert filtered[1].satname == "FENGYUN 2C DEB"

    def test_filter_by_inclination_range(self, satcat):
        assert len(satcat.filter_by_inclination_range(0, 10)) == 2908

    def test_independent_filters_commute(self, satcat):
        a = satcat.filter_by_types(["PAYLOAD"]).filter_by_name_pattern("STARLINK")
        b = satcat.filter_by_name_pattern("STARLINK").filter_by_types(["PAYLOAD"])
        assert a == b

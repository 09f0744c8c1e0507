"""
SatCat: Immutable, chainable view over satellite catalog records.

Every filter returns a new SatCat holding the matching records in their
original order; the receiver is never modified, so views can be shared
and filtered from several places at once.

Example:
    >>> cat = SatCat.from_json("data/satcat.json")
    >>> starlink = cat.filter_by_name_pattern("^STARLINK").filter_by_still_on_orbit()
    >>> print(len(starlink), starlink[0].satname)
"""

from __future__ import annotations

import math
import re
from collections import Counter
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union, overload

import aiohttp
import numpy as np
import pandas as pd

from satcat.catalog.exceptions import PatternError
from satcat.catalog.loaders import fetch_json, load_json_file
from satcat.catalog.records import SatelliteRecord, to_norad_id
from satcat.utils.logging_config import get_logger

logger = get_logger("catalog")

RecordLike = Union[SatelliteRecord, Mapping[str, Any]]


def _as_record(item: RecordLike) -> SatelliteRecord:
    if isinstance(item, SatelliteRecord):
        return item
    return SatelliteRecord.from_json_dict(item)


def _value_set(values: Union[str, int, Iterable]) -> frozenset:
    """Treat a lone string or number as a one-element set."""
    if isinstance(values, (str, bytes, int, float)):
        return frozenset([values])
    return frozenset(values)


def _compile_pattern(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise PatternError(f"Invalid pattern {pattern!r}: {e}", pattern=pattern) from e


class SatCat:
    """
    Ordered, read-only collection of SatelliteRecord.

    Supports len(), iteration, membership, integer indexing (returns a
    record) and slicing (returns a SatCat).
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[RecordLike] = ()):
        """
        Wrap a sequence of records.

        Args:
            records: SatelliteRecord instances or SATCAT JSON dicts. Records
                are shared, not copied.
        """
        self._records: tuple[SatelliteRecord, ...] = tuple(_as_record(r) for r in records)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_records(cls, records: Iterable[RecordLike]) -> SatCat:
        """Wrap an already-loaded sequence of records."""
        return cls(records)

    @classmethod
    def from_json(cls, filepath: Union[str, Path]) -> SatCat:
        """
        Load a catalog from a local JSON file.

        Args:
            filepath: Path to a SATCAT JSON document (array of records)

        Returns:
            SatCat over every record in the file

        Raises:
            LoadError: If the file is missing or malformed.
        """
        return cls(load_json_file(filepath))

    @classmethod
    async def from_url(
        cls,
        url: str,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
    ) -> SatCat:
        """
        Load a catalog from a URL serving a SATCAT JSON array.

        Args:
            url: Catalog URL
            session: Optional aiohttp session to issue the request on
            timeout: Optional total timeout in seconds

        Returns:
            SatCat over every record in the response

        Raises:
            LoadError: On network, HTTP, or decode failure.

        Example:
            >>> cat = await SatCat.from_url("https://example.org/satcat.json")
        """
        return cls(await fetch_json(url, session=session, timeout=timeout))

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SatelliteRecord]:
        return iter(self._records)

    def __contains__(self, item: object) -> bool:
        return item in self._records

    @overload
    def __getitem__(self, index: int) -> SatelliteRecord: ...

    @overload
    def __getitem__(self, index: slice) -> SatCat: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._records[index])
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SatCat):
            return NotImplemented
        return self._records == other._records

    __hash__ = None

    def __repr__(self) -> str:
        return f"SatCat(count={len(self._records)})"

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @classmethod
    def _derive(cls, records: tuple[SatelliteRecord, ...]) -> SatCat:
        view = cls.__new__(cls)
        view._records = records
        return view

    def filter(self, predicate: Callable[[SatelliteRecord], Any]) -> SatCat:
        """
        Keep the records for which ``predicate`` is truthy.

        Args:
            predicate: Function of one SatelliteRecord

        Returns:
            New SatCat with the matching records in original order
        """
        matched = tuple(r for r in self._records if predicate(r))
        logger.debug(f"filter: {len(self._records)} -> {len(matched)} records")
        return self._derive(matched)

    def filter_by_types(self, object_types: Iterable[str]) -> SatCat:
        """
        Filter by object type.

        Example:
            >>> cat.filter_by_types(["PAYLOAD", "ROCKET BODY"])
            >>> cat.filter_by_types(["DEBRIS", "UNKNOWN"])
        """
        wanted = _value_set(object_types)
        return self.filter(lambda sat: sat.object_type in wanted)

    def filter_by_name_pattern(self, pattern: str) -> SatCat:
        """
        Filter by a case-insensitive regular expression searched in SATNAME.

        Example:
            >>> cat.filter_by_name_pattern("^STARLINK")   # starts with
            >>> cat.filter_by_name_pattern("A$")          # ends with
            >>> cat.filter_by_name_pattern("STARLINK")    # contains

        Raises:
            PatternError: If the pattern does not compile.
        """
        regex = _compile_pattern(pattern)
        return self.filter(lambda sat: regex.search(sat.satname) is not None)

    def filter_by_country_codes(self, country_codes: Iterable[str]) -> SatCat:
        """Filter by owner/country code, e.g. ``["US", "JP"]``."""
        wanted = _value_set(country_codes)
        return self.filter(lambda sat: sat.country in wanted)

    def filter_by_still_on_orbit(self) -> SatCat:
        """Keep objects without a decay date."""
        return self.filter(lambda sat: sat.decay is None)

    def filter_by_launch_years(self, years: Iterable[int]) -> SatCat:
        """Keep objects launched in any of ``years``, e.g. ``[2019, 2020]``."""
        wanted = frozenset(y for y in map(float, _value_set(years)) if math.isfinite(y))
        return self.filter(lambda sat: sat.launch_year in wanted)

    def filter_by_launch_year_range(self, start_year: int, end_year: int) -> SatCat:
        """Keep objects launched from ``start_year`` to ``end_year`` inclusive."""
        return self.filter(lambda sat: start_year <= sat.launch_year <= end_year)

    def filter_by_max_perigee(self, max_perigee: float) -> SatCat:
        """Keep objects with perigee <= ``max_perigee`` km."""
        return self.filter(lambda sat: sat.perigee <= max_perigee)

    def filter_by_min_apogee(self, min_apogee: float) -> SatCat:
        """Keep objects with apogee >= ``min_apogee`` km."""
        return self.filter(lambda sat: sat.apogee >= min_apogee)

    def filter_by_inclination_range(self, min_inclination: float, max_inclination: float) -> SatCat:
        """Keep objects with inclination in [min, max] degrees."""
        return self.filter(lambda sat: min_inclination <= sat.inclination <= max_inclination)

    def filter_by_norad_ids(self, norad_ids: Iterable[Union[str, int]]) -> SatCat:
        """
        Keep objects with one of the given NORAD catalog IDs.

        IDs compare as strings; ``25544`` and ``"25544"`` are equivalent.
        """
        wanted = frozenset(to_norad_id(i) for i in _value_set(norad_ids))
        return self.filter(lambda sat: sat.norad_cat_id in wanted)

    def filter_by_norad_id_pattern(self, pattern: str) -> SatCat:
        """
        Filter by a regular expression searched in the NORAD ID.

        Example:
            >>> cat.filter_by_norad_id_pattern("^255")   # starts with 255
            >>> cat.filter_by_norad_id_pattern("255")    # contains 255

        Raises:
            PatternError: If the pattern does not compile.
        """
        regex = _compile_pattern(pattern)
        return self.filter(lambda sat: regex.search(sat.norad_cat_id) is not None)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        return [r.satname for r in self._records]

    def to_json_dicts(self) -> list[dict]:
        """Source JSON objects of every record, in order."""
        return [r.to_json_dict() for r in self._records]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per record with the source SATCAT columns."""
        return pd.DataFrame(self.to_json_dicts())

    def summary(self) -> dict:
        """
        Get statistics about the records in this view.

        Returns:
            Dictionary with the record count, counts per object type, and
            perigee/apogee extremes (km, None when no numeric value exists)
        """
        if not self._records:
            return {"count": 0}

        perigees = np.array([r.perigee for r in self._records], dtype=np.float64)
        apogees = np.array([r.apogee for r in self._records], dtype=np.float64)

        def _extreme(values: np.ndarray, reducer) -> Optional[float]:
            finite = values[np.isfinite(values)]
            return float(reducer(finite)) if finite.size else None

        return {
            "count": len(self._records),
            "by_object_type": dict(Counter(r.object_type for r in self._records)),
            "min_perigee_km": _extreme(perigees, np.min),
            "max_perigee_km": _extreme(perigees, np.max),
            "min_apogee_km": _extreme(apogees, np.min),
            "max_apogee_km": _extreme(apogees, np.max),
        }

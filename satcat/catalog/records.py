"""
Satellite catalog record type and field coercion.

A SATCAT document is a JSON array of objects with upper-case keys
(SATNAME, OBJECT_TYPE, NORAD_CAT_ID, PERIGEE, ...). Numeric fields are
frequently stored as strings, so they are coerced once when the record
is built and kept as floats. Null and blank strings read as 0, while
absent keys and text that is not a number read as NaN.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from satcat.catalog.exceptions import LoadError

# Numeric literals accepted in string fields: decimal with optional exponent,
# signed Infinity, or an unsigned 0x/0o/0b integer.
_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def to_number(value: Any) -> float:
    """
    Coerce a SATCAT field value to a float.

    Args:
        value: Raw field value (number, numeric string, None, ...)

    Returns:
        The value as a float. None and blank strings give 0.0; strings
        that are not numeric literals ("N/A", "nan", "1_000") give NaN.

    Example:
        >>> to_number("408.2")
        408.2
        >>> to_number(None)
        0.0
        >>> math.isnan(to_number("N/A"))
        True
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _RADIX.fullmatch(text):
            return float(int(text, 0))
        if _DECIMAL.fullmatch(text):
            return float(text)
        return math.nan
    return math.nan


def _number_field(d: Mapping[str, Any], key: str) -> float:
    # An absent key is unknown, unlike an explicit null
    if key not in d:
        return math.nan
    return to_number(d[key])


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def to_norad_id(value: Any) -> str:
    """Normalize a NORAD catalog ID to its string form ("25544")."""
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class SatelliteRecord:
    """One tracked object from the satellite catalog."""

    satname: str
    object_type: str
    country: str
    norad_cat_id: str
    decay: Optional[str] = None
    launch_year: float = math.nan
    perigee: float = math.nan  # km
    apogee: float = math.nan  # km
    inclination: float = math.nan  # deg
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json_dict(cls, d: Mapping[str, Any]) -> "SatelliteRecord":
        """
        Create a record from a SATCAT JSON object.

        Args:
            d: Mapping with upper-case SATCAT keys

        Returns:
            SatelliteRecord with coerced fields; the source mapping is kept
            read-only in ``raw``.

        Raises:
            LoadError: If ``d`` is not a mapping.
        """
        if not isinstance(d, Mapping):
            raise LoadError(f"Expected a JSON object for a catalog record, got {type(d).__name__}")

        decay = d.get("DECAY")
        return cls(
            satname=_to_text(d.get("SATNAME")),
            object_type=_to_text(d.get("OBJECT_TYPE")),
            country=_to_text(d.get("COUNTRY")),
            norad_cat_id=to_norad_id(d.get("NORAD_CAT_ID")),
            decay=None if decay is None else str(decay),
            launch_year=_number_field(d, "LAUNCH_YEAR"),
            perigee=_number_field(d, "PERIGEE"),
            apogee=_number_field(d, "APOGEE"),
            inclination=_number_field(d, "INCLINATION"),
            raw=MappingProxyType(dict(d)),
        )

    def to_json_dict(self) -> dict:
        """Return a copy of the source JSON object."""
        return dict(self.raw)

    @property
    def on_orbit(self) -> bool:
        return self.decay is None

    def __repr__(self) -> str:
        return f"SatelliteRecord(norad={self.norad_cat_id!r}, name={self.satname!r}, type={self.object_type!r})"

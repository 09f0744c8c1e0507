"""
SatCat Catalog - Query helpers over satellite catalog (SATCAT) data

Loads an array of SATCAT records from a JSON file or URL and exposes
chainable, order-preserving filters over them.

Components:
- records: SatelliteRecord and numeric field coercion
- satcat: SatCat, the immutable filterable view
- loaders: local JSON file and async HTTP document loading
- exceptions: LoadError and PatternError

Example:
    >>> from satcat.catalog import SatCat
    >>> cat = SatCat.from_json("data/satcat.json")
    >>> iss = cat.filter_by_norad_ids(["25544"])
"""

__version__ = "0.1.0"

from .exceptions import SatCatError, LoadError, PatternError
from .records import SatelliteRecord, to_number, to_norad_id
from .loaders import load_json_file, fetch_json
from .satcat import SatCat

__all__ = [
    "SatCatError",
    "LoadError",
    "PatternError",
    "SatelliteRecord",
    "to_number",
    "to_norad_id",
    "load_json_file",
    "fetch_json",
    "SatCat",
]

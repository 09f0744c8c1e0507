"""
Catalog document loading from local JSON files and HTTP endpoints.

Both loaders return the decoded JSON array of record objects; wrapping
them into a SatCat is left to the caller.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional, Union

import aiohttp

from satcat.catalog.exceptions import LoadError
from satcat.utils.logging_config import get_logger

logger = get_logger("catalog")


def _validate_document(data: Any, source: str) -> List[dict]:
    """Check that a decoded document is a JSON array of objects."""
    if not isinstance(data, list):
        logger.error(f"Catalog document from {source} is not a JSON array")
        raise LoadError(
            f"Expected a JSON array of records from {source}, got {type(data).__name__}",
            source=source,
        )

    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.error(f"Catalog record {i} from {source} is not a JSON object")
            raise LoadError(
                f"Record {i} from {source} is a {type(item).__name__}, expected a JSON object",
                source=source,
            )

    return data


def load_json_file(filepath: Union[str, Path]) -> List[dict]:
    """
    Load a SATCAT document from a local JSON file.

    Args:
        filepath: Path to a JSON file holding an array of records

    Returns:
        List of record dicts, in file order

    Raises:
        LoadError: If the file is missing, unreadable, or not a JSON array
            of objects.

    Example:
        >>> records = load_json_file("data/satcat.json")
        >>> print(f"Loaded {len(records)} records")
    """
    filepath = Path(filepath)
    source = str(filepath)

    if not filepath.is_file():
        logger.error(f"Catalog file not found: {filepath}")
        raise LoadError(f"Catalog file not found: {filepath}", source=source)

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read catalog file {filepath}: {e}")
        raise LoadError(f"Failed to read catalog file {filepath}: {e}", source=source) from e
    except json.JSONDecodeError as e:
        logger.error(f"Catalog file {filepath} is not valid JSON: {e}")
        raise LoadError(f"Catalog file {filepath} is not valid JSON: {e}", source=source) from e

    records = _validate_document(data, source)
    logger.info(f"Loaded {len(records)} catalog records from {filepath}")

    return records


async def fetch_json(
    url: str,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: Optional[float] = None,
) -> List[dict]:
    """
    Fetch a SATCAT document with a single HTTP GET.

    Args:
        url: URL returning a JSON array of records
        session: Existing client session to reuse. A private session is
            opened and closed when omitted.
        timeout: Total request timeout in seconds. No timeout when omitted.

    Returns:
        List of record dicts, in response order

    Raises:
        LoadError: On connection failure, non-2xx status, timeout, or a
            body that is not a JSON array of objects.

    Note:
        Makes exactly one request; there is no retry.
    """
    logger.info(f"Fetching catalog from {url}")

    client_timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None

    try:
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                data = await _get_json(own_session, url, client_timeout)
        else:
            data = await _get_json(session, url, client_timeout)
    except aiohttp.ClientResponseError as e:
        logger.error(f"Catalog request to {url} failed with HTTP {e.status}")
        raise LoadError(f"HTTP {e.status} fetching catalog from {url}: {e.message}", source=url) from e
    except aiohttp.ClientError as e:
        logger.error(f"Failed to fetch catalog from {url}: {e}")
        raise LoadError(f"Failed to fetch catalog from {url}: {e}", source=url) from e
    except asyncio.TimeoutError as e:
        logger.error(f"Timed out fetching catalog from {url}")
        raise LoadError(f"Timed out fetching catalog from {url}", source=url) from e
    except ValueError as e:
        logger.error(f"Catalog response from {url} is not valid JSON: {e}")
        raise LoadError(f"Catalog response from {url} is not valid JSON: {e}", source=url) from e

    records = _validate_document(data, url)
    logger.info(f"Fetched {len(records)} catalog records from {url}")

    return records


async def _get_json(
    session: aiohttp.ClientSession,
    url: str,
    client_timeout: Optional[aiohttp.ClientTimeout],
) -> Any:
    kwargs = {"timeout": client_timeout} if client_timeout is not None else {}
    async with session.get(url, **kwargs) as response:
        response.raise_for_status()
        # content_type=None: servers often label JSON as text/plain
        return await response.json(content_type=None)

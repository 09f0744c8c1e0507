#!/usr/bin/env python3
"""
Download a satellite catalog (SATCAT) JSON document.
The saved file can then be queried with scripts/query_satcat.py.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import requests

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from satcat.utils.config_loader import Config
from satcat.utils.logging_config import LogConfig, get_logger

logger = get_logger("data_download")


def download_satcat(url: str, output_path: Path, timeout: float = 30.0) -> bool:
    """
    Download a SATCAT document from URL.

    Args:
        url: URL serving a JSON array of catalog records
        output_path: Path to save the document
        timeout: Request timeout in seconds

    Returns:
        True if successful, False otherwise
    """
    try:
        logger.info(f"Downloading from {url}")
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        records = response.json()
    except requests.RequestException as e:
        logger.error(f"Failed to download from {url}: {e}")
        return False
    except ValueError as e:
        logger.error(f"Response from {url} is not valid JSON: {e}")
        return False

    if not isinstance(records, list):
        logger.error(f"Response from {url} is not a JSON array")
        return False

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(records))

    logger.info(f"Downloaded {len(records)} records to {output_path}")
    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Download a SATCAT JSON document")
    parser.add_argument(
        "--url",
        help="Catalog URL (default: remote_url from config/catalog.yaml)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: source_path from config/catalog.yaml)"
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path("config"),
        help="Configuration directory"
    )

    args = parser.parse_args(argv)

    config = Config(args.config_dir)
    config.load_all()

    LogConfig.setup(log_level=config.logging.level, log_file=config.logging.log_file)

    url = args.url or config.catalog.remote_url
    if not url:
        logger.error("No catalog URL given and none configured")
        return 1

    output_path = args.output or config.catalog.source_path

    if download_satcat(url, output_path, timeout=config.catalog.request_timeout_seconds):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
CLI script for querying a satellite catalog.

Loads a SATCAT JSON document from a file or URL, applies the requested
filters in sequence, and prints or saves the matching records.
"""

import asyncio
import json
import sys
from pathlib import Path

import click

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from satcat.catalog import LoadError, PatternError, SatCat
from satcat.utils.config_loader import Config
from satcat.utils.logging_config import LogConfig, get_logger

logger = get_logger("cli")


def _load(source, url, timeout):
    if url:
        return asyncio.run(SatCat.from_url(url, timeout=timeout))
    return SatCat.from_json(source)


def apply_filters(cat, object_types=(), name=None, countries=(), on_orbit=False,
                  launch_years=(), launch_year_range=None, max_perigee=None,
                  min_apogee=None, inclination_range=None, norad_ids=(), norad_pattern=None):
    """
    Apply CLI filter options to a catalog, in a fixed order.

    Empty/None options are skipped.

    Returns:
        Filtered SatCat
    """
    if object_types:
        cat = cat.filter_by_types(object_types)
    if name:
        cat = cat.filter_by_name_pattern(name)
    if countries:
        cat = cat.filter_by_country_codes(countries)
    if on_orbit:
        cat = cat.filter_by_still_on_orbit()
    if launch_years:
        cat = cat.filter_by_launch_years(launch_years)
    if launch_year_range:
        cat = cat.filter_by_launch_year_range(*launch_year_range)
    if max_perigee is not None:
        cat = cat.filter_by_max_perigee(max_perigee)
    if min_apogee is not None:
        cat = cat.filter_by_min_apogee(min_apogee)
    if inclination_range:
        cat = cat.filter_by_inclination_range(*inclination_range)
    if norad_ids:
        cat = cat.filter_by_norad_ids(norad_ids)
    if norad_pattern:
        cat = cat.filter_by_norad_id_pattern(norad_pattern)
    return cat


@click.command()
@click.option(
    '--source',
    '-s',
    type=click.Path(dir_okay=False),
    help='Path to SATCAT JSON file (default: from config/catalog.yaml)'
)
@click.option('--url', help='Load the catalog from this URL instead of a file')
@click.option(
    '--config-dir',
    default='config',
    type=click.Path(file_okay=False),
    help='Configuration directory'
)
@click.option('--type', 'object_types', multiple=True, help='Object type (repeatable), e.g. PAYLOAD')
@click.option('--name', help='Case-insensitive regex matched against SATNAME')
@click.option('--country', 'countries', multiple=True, help='Country code (repeatable)')
@click.option('--on-orbit', is_flag=True, help='Only objects that have not decayed')
@click.option('--launch-year', 'launch_years', multiple=True, type=int, help='Launch year (repeatable)')
@click.option('--launch-year-range', nargs=2, type=int, default=None, help='Inclusive launch year range: START END')
@click.option('--max-perigee', type=float, help='Maximum perigee (km)')
@click.option('--min-apogee', type=float, help='Minimum apogee (km)')
@click.option('--inclination-range', nargs=2, type=float, default=None, help='Inclusive inclination range: MIN MAX (deg)')
@click.option('--norad', 'norad_ids', multiple=True, help='NORAD catalog ID (repeatable)')
@click.option('--norad-pattern', help='Regex matched against NORAD catalog ID')
@click.option('--limit', '-n', default=20, type=int, show_default=True, help='Rows to print (0 for none)')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write matching records to a JSON file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def main(source, url, config_dir, object_types, name, countries, on_orbit, launch_years,
         launch_year_range, max_perigee, min_apogee, inclination_range, norad_ids,
         norad_pattern, limit, output, verbose):
    """
    Query a satellite catalog.

    Examples:
        # Starlink satellites still on orbit
        python scripts/query_satcat.py --name '^STARLINK' --on-orbit

        # US and Canadian payloads launched 2019-2020
        python scripts/query_satcat.py --type PAYLOAD --country US --country CA --launch-year-range 2019 2020

        # Look up the ISS and save it
        python scripts/query_satcat.py --norad 25544 -o iss.json
    """
    config = Config(Path(config_dir))
    config.load_all()

    LogConfig.setup(
        log_level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.log_file,
    )

    source = source or config.catalog.source_path

    try:
        cat = _load(source, url, config.catalog.request_timeout_seconds)
        total = len(cat)
        cat = apply_filters(
            cat,
            object_types=object_types,
            name=name,
            countries=countries,
            on_orbit=on_orbit,
            launch_years=launch_years,
            launch_year_range=launch_year_range,
            max_perigee=max_perigee,
            min_apogee=min_apogee,
            inclination_range=inclination_range,
            norad_ids=norad_ids,
            norad_pattern=norad_pattern,
        )
    except (LoadError, PatternError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Matched {len(cat)} of {total} records")

    for record in cat[:max(limit, 0)]:
        click.echo(f"{record.norad_cat_id:>7}  {record.satname:<28}  {record.object_type:<12}  {record.country}")

    if output:
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w') as f:
            json.dump(cat.to_json_dicts(), f, indent=2)
        logger.info(f"Wrote {len(cat)} records to {output}")
        click.echo(f"Saved to {output}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Sunday roles auto-generation CLI.

Usage:
  # Write sample roles/roster/slots files to ./assets
  python run_roster.py init-assets --dir assets

  # Fill every role on every Sunday and write the table as CSV
  python run_roster.py generate --roster assets/roster.yaml --slots assets/slots.yaml \
      --out roles_2026.csv --seed 7

  # Merge scripture portions for the year into each Sunday
  python run_roster.py generate --roster rolesList.json --slots slots.csv \
      --scripture scripturePortion.json --year 2026 --out roles_2026.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from roles_core.config import ensure_assets_exist, load_engine_config, load_role_specs
from roles_core.fairness import fairness_report
from roles_core.io import (
    load_groupings, load_roster, load_scripture, save_result_csv_bytes, summary_message,
)
from roles_core.scheduler import schedule_roles
from roles_core.validation import check_coverage


def cmd_init_assets(args):
    """Write default asset files (existing files are left alone)."""
    ensure_assets_exist(args.dir)
    print(f"Assets ready in: {Path(args.dir).resolve()}")


def cmd_generate(args):
    """Run the assignment engine and write the resulting table."""
    config = load_engine_config(args.config, random_seed=args.seed)
    roles = load_role_specs(args.roles)
    roster = load_roster(args.roster)
    groupings = load_groupings(args.slots)
    metadata = load_scripture(args.scripture, year=args.year) if args.scripture else None

    for name in check_coverage(roster, roles):
        print(f"  Warning: no eligible people configured for '{name}'")

    result = schedule_roles(groupings, roster, roles, config=config, metadata=metadata)

    print(summary_message(result.summary, sentinel=config.sentinel))
    if args.report:
        print()
        print(fairness_report(result.ledger, roster.people(roles)).to_string(index=False))
    data = save_result_csv_bytes(result, roles)
    if args.out:
        Path(args.out).write_bytes(data)
        print(f"\nWritten: {args.out}")
    else:
        sys.stdout.write(data.decode("utf-8"))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fair rotation of Sunday service roles")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init-assets", help="Write sample roles, roster and slots files")
    p.add_argument("--dir", default="assets")
    p.set_defaults(func=cmd_init_assets)

    p = sub.add_parser("generate", help="Assign people to roles for every slot")
    p.add_argument("--roster", required=True, help="Roster JSON/YAML (role key -> people)")
    p.add_argument("--slots", required=True, help="Groupings YAML or CSV (grouping,date)")
    p.add_argument("--roles", default=None, help="Role definitions YAML (defaults built in)")
    p.add_argument("--config", default=None, help="Engine config YAML")
    p.add_argument("--scripture", default=None, help="Scripture portions JSON/YAML")
    p.add_argument("--year", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--out", default=None, help="CSV output path (stdout if omitted)")
    p.add_argument("--report", action="store_true", help="Print per-person load after the summary")
    p.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Resolve a railway dataset for one or more years and print the result.

Usage
-----
Point the script at a data directory (or base URL) and pick years::

    python scripts/query_year.py --data-dir data 1898 1935 1975
    python scripts/query_year.py --base-url https://example.org/data --json 1900

Without ``--data-dir``/``--base-url`` the ``RAILATLAS_*`` environment
variables are used.

Options::

    --data-dir DIR       Load tables from DIR
    --base-url URL       Load tables over HTTP from URL
    --no-demo            Fail instead of using the demo timeline for missing tables
    --json               Output the full snapshots as JSON
    --output FILE        Write output to FILE instead of stdout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from railatlas import AtlasConfig, DataUnavailableError, RailAtlas, RailAtlasError, YearSnapshot  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_snapshot(snapshot: YearSnapshot) -> list[str]:
    out = [_section(f"YEAR {snapshot.year}")]
    for collection, counts in snapshot.summary().items():
        total = sum(counts.values())
        detail = ", ".join(f"{state}={count}" for state, count in sorted(counts.items()))
        out.append(f"  {collection:<9}: {total} ({detail or 'none'})")
    for segment in snapshot.segments:
        if segment.state.value != "existing":
            out.append(f"    {segment.segment_id} {segment.from_station_id} -> {segment.to_station_id}: {segment.state}")
    return out


def _snapshot_dict(snapshot: YearSnapshot) -> dict[str, Any]:
    return snapshot.model_dump(
        mode="json",
        exclude={"stations": {"__all__": {"raw"}}, "segments": {"__all__": {"raw"}}},
    )


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve railway network state per year")
    parser.add_argument("years", nargs="+", type=int, help="Years to resolve")
    parser.add_argument("--data-dir", help="Directory holding the source CSV tables")
    parser.add_argument("--base-url", help="Base URL the source CSV tables are served under")
    parser.add_argument("--no-demo", action="store_true", help="Do not substitute the demo timeline")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Output JSON")
    parser.add_argument("--output", help="Write output to FILE")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
        overrides["base_url"] = None
    elif args.base_url:
        overrides["base_url"] = args.base_url
        overrides["data_dir"] = None
    if args.no_demo:
        overrides["demo_timeline"] = False
    config = AtlasConfig.from_env(**overrides)

    try:
        async with RailAtlas(config) as atlas:
            await atlas.load()
            snapshots = [atlas.query_for_year(year) for year in args.years]
    except DataUnavailableError as exc:
        print(f"Dataset unavailable: {exc}", file=sys.stderr)
        return 1
    except RailAtlasError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    if args.json_mode:
        text = json.dumps([_snapshot_dict(s) for s in snapshots], indent=2, ensure_ascii=False)
    else:
        lines: list[str] = []
        for snapshot in snapshots:
            lines.extend(_format_snapshot(snapshot))
        text = "\n".join(lines)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

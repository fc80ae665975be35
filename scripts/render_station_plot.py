"""
Render station plots from raw METAR reports.

Usage:
    python scripts/render_station_plot.py "KXYZ 191853Z 27012KT 10SM FEW040 22/15 A3012"
    python scripts/render_station_plot.py --file reports.txt --output-dir plots/

A single report is written to stdout unless --output-dir is given.  With
--file, each non-blank line is one report and every plot is written to
``<output-dir>/<station>.svg``.  Reports that fail to decode are logged
and skipped; the exit status is 1 if any failed.
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import DEFAULT_HEIGHT, DEFAULT_WIDTH, LOG_LEVEL
from data.decoder import DecodeError
from data.extractor import extract
from utils.logger_setup import setup_logging
from visualization.station_plot import render

logger = logging.getLogger(__name__)


def read_reports(path: str) -> list:
    with open(path) as f:
        return [line.strip() for line in f if line.strip()]


def output_path(output_dir: str, station: str, index: int, taken=()) -> str:
    """
    Path for one rendered report.

    ``<station>.svg`` normally; a station already written in this run
    gets the report index appended (``KXYZ-2.svg``) so time series from
    one station keep every plot.
    """
    name = station or f"report-{index}"
    path = os.path.join(output_dir, f"{name}.svg")
    if path in taken:
        path = os.path.join(output_dir, f"{name}-{index}.svg")
    return path


def render_reports(reports, output_dir, width, height, stream=None) -> int:
    """
    Render each report and write it out.

    Returns:
        Number of reports that failed to decode.
    """
    if stream is None:
        stream = sys.stdout
    failures = 0
    written = set()
    for index, raw in enumerate(reports, start=1):
        try:
            plot = extract(raw)
        except DecodeError as e:
            logger.error(f"Could not decode report {index} ({raw!r}): {e}")
            failures += 1
            continue

        svg = render(plot, width, height)
        if output_dir:
            path = output_path(output_dir, plot.station, index, written)
            with open(path, "w", encoding="utf-8") as f:
                f.write(svg)
            written.add(path)
            logger.info(f"Wrote {path}")
        else:
            stream.write(svg + "\n")
    return failures


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render METAR station plots as SVG")
    parser.add_argument("report", nargs="?", help="Raw METAR report")
    parser.add_argument("--file", help="File with one raw report per line")
    parser.add_argument("--output-dir", help="Directory for <station>.svg files")
    parser.add_argument("--width", default=DEFAULT_WIDTH, help="CSS width of the SVG")
    parser.add_argument("--height", default=DEFAULT_HEIGHT, help="CSS height of the SVG")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", help="Optional rotating log file")
    args = parser.parse_args(argv)

    if bool(args.report) == bool(args.file):
        parser.error("give exactly one of a report or --file")

    setup_logging(args.log_level, args.log_file)

    reports = read_reports(args.file) if args.file else [args.report]
    if args.output_dir:
        os.makedirs(args.output_dir, exist_ok=True)

    failures = render_reports(reports, args.output_dir, args.width, args.height)
    if failures:
        logger.error(f"{failures} of {len(reports)} reports failed to decode")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

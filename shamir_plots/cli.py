"""Command-line entry point.

With no arguments every figure in the catalogue is rendered into the
configured output directory.
"""

import argparse
import sys
from typing import List, Optional

from shamir_plots.config import Config, LOG_LEVEL_ENV, OUTPUT_DIR_ENV
from shamir_plots.exceptions import (
    BatchRenderError,
    ConfigurationError,
    FigureNotFoundError,
    RenderError,
)
from shamir_plots.figures import get_figure, list_figures, render_figures
from shamir_plots.logger import ConsoleLogger, Logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-plots",
        description="Render SVG illustrations of polynomial interpolation and Shamir's Secret Sharing",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Directory to write SVG files to (default: plots, or {OUTPUT_DIR_ENV} env var)",
    )
    parser.add_argument(
        "--figure",
        dest="figures",
        action="append",
        metavar="NAME",
        default=None,
        help="Render only this figure; repeat for several (default: all figures)",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Keep rendering the remaining figures after one fails",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available figures and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help=f"Logging verbosity (default: INFO, or {LOG_LEVEL_ENV} env var)",
    )
    return parser


def list_catalogue(logger: Logger) -> int:
    for name in list_figures():
        figure = get_figure(name)
        logger.info(f"{name:<28} {figure.filename:<32} {figure.params.title}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = Config.get_log_level(args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logger: Logger = ConsoleLogger(level=level)

    if args.list:
        return list_catalogue(logger)

    output_dir = Config.get_output_dir(args.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create output directory", output_dir=str(output_dir), error=str(e))
        return 1

    try:
        summaries = render_figures(
            output_dir,
            names=args.figures,
            keep_going=args.keep_going,
            logger=logger,
        )
    except FigureNotFoundError as e:
        logger.error(str(e))
        return 1
    except BatchRenderError as e:
        for name, error in e.failures.items():
            logger.error("Figure failed", figure=name, error=str(error))
        return 1
    except RenderError as e:
        logger.error("Render failed", error=str(e))
        return 1

    for summary in summaries:
        logger.info(f"Wrote {summary.destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

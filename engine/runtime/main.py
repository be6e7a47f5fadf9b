"""
Tangle Statistics - Main Entry Point

Builds the tangle described by an input file and prints its node dump
and summary statistics.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from engine.config.loader import ConfigLoader
from engine.runtime.coordinator import GraphCoordinator
from engine.runtime.report import format_json, format_node_dump, format_summary

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tangle-stats",
        description="Compute depth and reference statistics for a tangle DAG file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Tangle description file (default: DAG_INPUT_PATH or config file)",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--no-nodes",
        dest="show_nodes",
        action="store_const",
        const=False,
        help="Skip the per-node dump",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 if the run was aborted
    """
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader(args.config).load({
            "input_path": args.input,
            "output_format": args.output_format,
            "show_nodes": args.show_nodes,
            "log_level": args.log_level,
        })
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Configuration error: {e}")
        return 1

    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)

    logger.info("=" * 60)
    logger.info("Tangle Statistics Starting")
    logger.info("=" * 60)
    logger.info(f"Input: {config.input_path}")

    # Everything is computed before anything is printed
    try:
        coordinator = GraphCoordinator(config)
        stats = coordinator.run()
        rows = coordinator.node_summaries() if config.show_nodes else []
    except ValueError as e:
        logger.error(f"Analysis aborted: {e}")
        return 1

    if config.output_format == "json":
        print(format_json(stats, rows))
    else:
        if rows:
            print(format_node_dump(rows))
        print(format_summary(stats))

    metrics = coordinator.get_metrics()
    logger.info(
        f"Done: {metrics['nodes']} nodes, {metrics['edges']} edges, "
        f"max depth {metrics['max_depth']}, "
        f"{metrics['root_descendants']} nodes reachable from the root"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Documentation extraction entry point.

Indexes the Java source tree, extracts documentation of every class
deriving from the framework's base types and writes it as one JSON file.
A type that cannot be resolved stops the run before anything is written.

Usage:
    python run_docgen.py /path/to/berray/src/main/java
    python run_docgen.py ./src/main/java --output build/doc.json
    python run_docgen.py ./src/main/java --config docgen.yml --lookup-path ../engine/src
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from core.docgen_config import ConfigValidationError, DocgenConfig, load_docgen_config
from core.run_artifacts import write_doc_artifact, write_run_report
from core.structured_logging import configure_structured_logging, phase_scope, set_run_id
from docgen.extractor import DocgenResult, extract_directory

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract class documentation from a Java source tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_docgen.py ./src/main/java\n"
            "  python run_docgen.py ./src/main/java --output doc/doc.json --verbose\n"
        )
    )

    parser.add_argument(
        "source_root",
        help="Path to the Java source folder to document."
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Path of the JSON documentation file. Default: doc/doc.json"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML or JSON configuration file."
    )
    parser.add_argument(
        "--interesting-type",
        action="append",
        default=[],
        metavar="FQN",
        help="Fully-qualified base type whose descendants are documented. "
             "Repeatable; replaces the configured set."
    )
    parser.add_argument(
        "--lookup-path",
        action="append",
        default=[],
        metavar="DIR",
        help="Extra source folder used only to resolve types. Repeatable."
    )
    parser.add_argument(
        "--no-interfaces",
        action="store_true",
        default=False,
        help="Ignore implements clauses when collecting ancestors."
    )
    parser.add_argument(
        "--report-dir",
        default=None,
        help="If set, write a JSON run report into this directory."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging."
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Missing or extra positional arguments print usage and exit with status 2.
    """
    return build_arg_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> DocgenConfig:
    config = load_docgen_config(args.config)
    return config.with_overrides(
        interesting_base_types=args.interesting_type,
        lookup_paths=args.lookup_path,
        include_interfaces=False if args.no_interfaces else None,
        output_path=args.output,
    )


def run(config: DocgenConfig, source_root: str) -> DocgenResult:
    """Extract documentation and write it unless resolution failed."""
    t0 = time.time()
    result = extract_directory(
        source_root,
        lookup_paths=config.lookup_paths,
        external_types=config.external_types,
        interesting_base_types=config.interesting_base_types,
        include_interfaces=config.include_interfaces,
    )
    logger.info("Extraction finished in %.2fs: %s", time.time() - t0, result.stats)

    if not result.ok:
        logger.error("Resolution failure: %s", result.failure.describe())
        logger.error("No documentation written.")
        return result

    with phase_scope("write"):
        path = write_doc_artifact(result.classes, config.output_path)
        logger.info("Wrote %d classes to %s", len(result.classes), path)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_structured_logging(logging.DEBUG if args.verbose else logging.INFO)
    run_id = set_run_id()

    try:
        config = resolve_config(args)
        result = run(config, args.source_root)
    except ConfigValidationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_FAILURE
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error("File error: %s", e)
        return EXIT_FAILURE

    if args.report_dir:
        report = {
            "status": "success" if result.ok else "failed",
            "source_root": args.source_root,
            "output_path": config.output_path if result.ok else None,
            "stats": result.stats.to_dict(),
            "failure": result.failure.describe() if result.failure else None,
        }
        path = write_run_report(report, run_id, output_dir=args.report_dir)
        logger.info("Run report: %s", path)

    return EXIT_OK if result.ok else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())

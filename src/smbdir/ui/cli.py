from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from smbdir.app import create_sample_structure, seal_business_data
from smbdir.config import (
    ConfigurationError,
    PipelineSettings,
    configure_logging,
    get_pipeline_settings,
    get_sealing_paths,
)
from smbdir.domain.directory import INDUSTRIES
from smbdir.domain.errors import NoInputDataError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from smbdir.config import SealingPaths

log = logging.getLogger(__name__)

COMMANDS = ("seal", "sample")


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input-dir",
        type=Path,
        help="Directory holding the raw business JSON files (defaults to config)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Path of the generated TypeScript data module (defaults to config)",
    )
    parser.add_argument(
        "--backup-dir",
        type=Path,
        help="Directory receiving timestamped backups of the previous module",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        help="Directory receiving the validation report and summary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seal Oregon SMB directory business data")
    subparsers = parser.add_subparsers(dest="command")

    seal = subparsers.add_parser("seal", help="Validate raw listings and generate the data module")
    _add_path_arguments(seal)
    seal.add_argument(
        "--fallback-industry",
        choices=INDUSTRIES,
        help="Industry for records whose trade cannot be mapped (default: reject them)",
    )

    sample = subparsers.add_parser("sample", help="Write a sample record template")
    _add_path_arguments(sample)

    args = list(argv)
    if not args or args[0] not in {*COMMANDS, "-h", "--help"}:
        args = ["seal", *args]
    return parser.parse_args(args)


def _build_paths(args: argparse.Namespace) -> SealingPaths:
    return get_sealing_paths().with_overrides(
        input_dir=args.input_dir,
        output_module=args.output,
        backup_dir=args.backup_dir,
        reports_dir=args.reports_dir,
    )


def _build_settings(args: argparse.Namespace) -> PipelineSettings:
    if args.fallback_industry is not None:
        return PipelineSettings(fallback_industry=args.fallback_industry)
    return get_pipeline_settings()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        paths = _build_paths(parsed_args)
        settings = _build_settings(parsed_args) if parsed_args.command == "seal" else None
    except (ConfigurationError, ValueError):
        log.exception("Configuration error")
        sys.exit(2)

    try:
        if parsed_args.command == "sample":
            sample_path = create_sample_structure(paths)
            log.info("Sample structure written to %s", sample_path)
        else:
            result = seal_business_data(paths, settings=settings)
            log.info("Data module written to %s", result.module_path)
    except NoInputDataError as exc:
        log.error("Data sealing failed: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during data sealing")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

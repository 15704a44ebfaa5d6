#!/usr/bin/env python3
"""TermoType - terminal typing speed test."""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from core.app_state import AppState
from core.profile_storage import ProfileStorage
from ui.screen import run
from utils.config import AppSettings, Config
from utils.paths import get_data_dir, get_state_dir

log = logging.getLogger("termotype")


def setup_logging(verbose: bool = False) -> Path:
    """Log to a rotating file in the XDG state directory.

    No console handler: output on stderr would corrupt the full-screen UI.

    Returns:
        Path of the log file
    """
    log_dir = get_state_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "termotype.log"

    # 5MB max, keep 5 backups
    file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[file_handler],
    )
    return log_file


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TermoType - typing speed test in the terminal")
    parser.add_argument("--mode", choices=["time", "words"], help="Test mode to start in")
    parser.add_argument("--words-file", help="JSON file with an array of words")
    parser.add_argument("--profile", type=Path, help="Profile file with best scores")
    parser.add_argument("--config-db", type=Path, help="Settings database path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def apply_cli_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Settings for this run with command line options applied.

    Options are not written to the settings database.

    Raises:
        ValidationError: If an option value is invalid
    """
    updates = {}
    if args.mode:
        updates["default_mode"] = args.mode
    if args.words_file:
        updates["words_file"] = str(Path(args.words_file).expanduser().resolve())

    if not updates:
        return settings
    log.info(f"Command line overrides: {updates}")
    return AppSettings.model_validate({**settings.model_dump(), **updates})


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    log_file = setup_logging(args.verbose)

    log.info("Starting TermoType...")

    config = Config(args.config_db or get_data_dir() / "settings.db")
    try:
        settings = apply_cli_overrides(config.settings(), args)
    except ValidationError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 2

    state = AppState(settings, ProfileStorage(args.profile))
    state.init_test()

    try:
        run(state)
    except KeyboardInterrupt:
        log.info("Interrupted")
    except Exception:
        log.exception("TermoType crashed")
        print(f"TermoType crashed, see {log_file}", file=sys.stderr)
        return 1

    log.info("TermoType shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())

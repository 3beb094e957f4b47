"""Command line for browsing and editing calendar notes."""

import logging
import sys

from calnotes.config import NotesConfig


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: NotesConfig | None = None
) -> None:
    """Send every record to the log file and warnings to stderr.

    Store and refresh failures are logged at WARNING, so they reach the
    terminal unless the command runs with --quiet.

    Args:
        verbose: Lower the stderr threshold to INFO
        quiet: Raise the stderr threshold to ERROR
        config: Source of the log directory and file name (read from the
            environment when omitted)
    """
    if config is None:
        config = NotesConfig.from_env()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)

    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers left by an earlier invocation in the same process
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Run the calnotes command line."""
    from calnotes_cli.parser import app

    app()


__all__ = ["main", "setup_logging"]

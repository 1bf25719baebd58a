"""
Command-line entry point for srcedit.

``srcedit PATTERN`` opens every file under ``src/`` whose path matches
PATTERN (case-insensitive regex) in the editor, then formats and checks the
project if the editor exited cleanly.
"""

import logging
import sys

import click

from .errors import ConfigurationError, LocatorError, StageLaunchFailure
from .models.config import SrceditConfig, load_config
from .tools.locator import Locator
from .tools.pipeline import PipelineRunner


logger = logging.getLogger(__name__)

# sysexits.h codes; 2 stays reserved for click usage errors
EXIT_LOCATE_ERROR = 65  # EX_DATAERR
EXIT_CONFIG_ERROR = 78  # EX_CONFIG
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr so they never mix with tool output on stdout."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _fail(message: str) -> None:
    click.echo(f"srcedit: {message}", err=True)


def execute(pattern: str, config: SrceditConfig) -> int:
    """
    Locate files and run the pipeline, mapping every outcome to an exit status.

    Args:
        pattern: Case-insensitive regular expression for file paths
        config: Configuration for the locator and the stages

    Returns:
        Process exit status
    """
    try:
        matches = Locator(config).locate(pattern)
    except LocatorError as e:
        _fail(str(e))
        return EXIT_LOCATE_ERROR

    logger.info(f"{len(matches)} file(s) matched '{pattern}'")

    try:
        result = PipelineRunner(config).run(matches)
    except StageLaunchFailure as e:
        _fail(str(e))
        return e.exit_status

    failed = result.failed_stage
    if failed is not None:
        logger.warning(f"{failed.stage.value} stage failed with exit status {failed.returncode}")
    return result.exit_status


@click.command()
@click.argument("pattern")
@click.pass_context
def main(ctx: click.Context, pattern: str) -> None:
    """Edit files under src/ matching PATTERN, then format and check the project."""
    configure_logging()

    try:
        config = load_config()
    except ConfigurationError as e:
        _fail(str(e))
        ctx.exit(EXIT_CONFIG_ERROR)

    ctx.exit(execute(pattern, config))

"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from chromaseq import __version__

from .commands import check, compare, config, generate, invert, request, serve
from .context import CliContext

logger = logging.getLogger(__name__)

# Marks handlers installed here so repeated setup replaces them
_HANDLER_FLAG = "_chromaseq_handler"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Console output goes to stderr so stdout stays clean for colors and
    JSON. A rotating log file is added only in debug mode or when a log
    file is given.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    # Determine log level based on flags
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    setattr(console_handler, _HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    log_path = None
    file_level = level
    if debug and not log_file:
        # Debug mode: log to current directory
        log_path = Path.cwd() / "chromaseq-debug.log"
    elif log_file:
        log_path = log_file
        file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())

    if log_path is not None:
        # Create rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(min(level, file_level))

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="chromaseq")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./chromaseq-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar='CHROMASEQ_CONFIG',
    default=None,
    help='Settings file (default: ~/.chromaseq/config.json)'
)
def cli(
    ctx,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    config_path: Optional[Path],
):
    """
    chromaseq - deterministic low-discrepancy color sequences.

    Generate colors from golden-ratio, plastic, Halton, R-sequence,
    Kronecker, Sobol, Pisot and continued-fraction sequences, and recover
    the index that produced a color.

    \b
    Examples:
      # Ten plastic-constant colors with seed 42
      chromaseq generate plastic -n 10 --seed 42

      # Which index produced this color?
      chromaseq invert '#851BE4' plastic --seed 42

      # Halton over bases 2, 3, 7 in HSL mode
      chromaseq generate halton -p bases=[2,3,7] -p mode=hsl

      # Rank methods by uniformity
      chromaseq compare -n 1000

      # JSON tool call
      chromaseq request generate '{"method": "sobol", "count": 4}'
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.obj = CliContext(config_path=config_path)


cli.add_command(generate)
cli.add_command(invert)
cli.add_command(check)
cli.add_command(compare)
cli.add_command(request)
cli.add_command(serve)
cli.add_command(config)

if __name__ == "__main__":
    cli()

"""Command-line interface for estimating draw odds."""

import logging

import click

from .config import get_config
from .core.hand import Hand
from .display import format_line
from .evaluation.estimator import ReplacementEstimator

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str, log_format: str) -> None:
    """Send log records to stderr so stdout only carries result lines."""
    logging.basicConfig(level=level.upper(), format=log_format, force=True)


def process_line(raw_line: str, estimator: ReplacementEstimator) -> str:
    """
    Parse, estimate and format one input line.

    Malformed lines produce the error line instead of raising.
    """
    try:
        hand = Hand.from_string(raw_line)
    except ValueError as e:
        logger.debug(f"Rejected input line: {e}")
        return format_line(raw_line, None)

    return format_line(raw_line, estimator.estimate(hand))


@click.command()
@click.argument('input_file', type=click.File('r'), default='-')
@click.option('--config', 'config_name', default=None,
              type=click.Choice(['development', 'testing', 'production']),
              help='Configuration to use (default: $DRAW_ODDS_ENV or production)')
@click.option('--sample-size', type=click.IntRange(min=1), default=None,
              help='Replacement draws per card')
@click.option('--seed', type=int, default=None, help='Seed for reproducible results')
@click.option('--workers', type=click.IntRange(min=1), default=None,
              help='Processes used to estimate the five cards')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Logging level for stderr output')
def main(input_file, config_name, sample_size, seed, workers, log_level):
    """
    Estimate the chance of improving five card poker hands.

    Reads one hand per line from INPUT_FILE (standard input by default),
    e.g. "2D 2C 5H 2H 2S", and prints the hand's category followed by the
    chance of improving it by replacing each card.
    """
    settings = get_config(config_name)
    setup_logging(log_level or settings.LOG_LEVEL, settings.LOG_FORMAT)

    estimator = ReplacementEstimator(
        sample_size=sample_size or settings.SAMPLE_SIZE,
        seed=seed if seed is not None else settings.SEED,
        workers=workers or settings.WORKERS,
    )
    logger.info(
        f"Using {settings.__name__}: {estimator.sample_size} samples per card, "
        f"{estimator.workers} worker(s)"
    )

    for raw in input_file:
        click.echo(process_line(raw.rstrip('\n'), estimator))


if __name__ == '__main__':
    main()

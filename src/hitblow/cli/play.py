"""CLI command for playing Hit and Blow in the terminal."""

from __future__ import annotations

import logging

import click

from hitblow.play.session import PlaySession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--debug", is_flag=True, help="Show the secret at the start of each game")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    debug: bool,
    show_rules: bool,
    verbose: bool,
):
    """Play Hit and Blow: guess 4 distinct digits from 1-6 in 10 attempts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(seed=seed, debug=debug, show_rules=show_rules)
    logger.debug(f"Session config: {config}")
    session = PlaySession(config)

    try:
        outcomes = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        outcomes = session.outcomes

    click.echo(f"\nGames played: {len(outcomes)}, won: {session.games_won}")
    if verbose:
        click.echo(f"Seed: {config.seed} (use --seed {config.seed} to replay)")

    click.echo("Thanks for playing!")


if __name__ == "__main__":
    main()

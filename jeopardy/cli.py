"""Command-line interface for the Jeopardy board."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import click

from .config import GameConfig
from .errors import (
    ConfigError,
    DataServiceError,
    IndexOutOfRangeError,
    InsufficientPoolError,
)
from .game import BoardBuilder, ShowText
from .service import TriviaApiClient
from .session import GameSession


def load_config(
    config_path: Optional[str],
    api_url: Optional[str] = None,
    categories: Optional[int] = None,
    clues: Optional[int] = None,
    seed: Optional[int] = None,
) -> GameConfig:
    """Defaults, then the config file, then JEOPARDY_* env vars, then command-line flags."""
    try:
        base = GameConfig.load_from_file(config_path) if config_path else GameConfig()
        config = GameConfig.from_env(os.environ, base=base)
        return config.replace(
            base_url=api_url,
            num_categories=categories,
            clues_per_category=clues,
            seed=seed,
        )
    except ConfigError as e:
        raise click.UsageError(str(e)) from e


def build_session(config: GameConfig) -> GameSession:
    client = TriviaApiClient(base_url=config.base_url, timeout_s=config.timeout_s)
    return GameSession(BoardBuilder.from_config(client, config))


def config_options(f):
    """Options shared by every command that talks to the trivia service."""
    f = click.option("--seed", "-s", type=int, help="Random seed for reproducible boards")(f)
    f = click.option("--clues", type=int, help="Clues per category")(f)
    f = click.option("--categories", type=int, help="Number of categories")(f)
    f = click.option("--api-url", help="Base URL of the trivia API")(f)
    f = click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Game config JSON file")(f)
    return f


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Jeopardy trivia board."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _start(session: GameSession) -> bool:
    """Build a board, reporting failures instead of raising. Returns True on success."""
    click.echo("Loading board...")
    try:
        session.start()
    except (DataServiceError, InsufficientPoolError) as e:
        click.echo(f"Could not build a board: {e}", err=True)
        click.echo("Type 'restart' to try again.")
        return False
    return True


@main.command()
@config_options
def play(config_path, api_url, categories, clues, seed):
    """Play in the terminal: enter '<column> <row>' to reveal a clue."""
    config = load_config(config_path, api_url, categories, clues, seed)
    session = build_session(config)

    if _start(session):
        click.echo(session.board.render_text(config.tile_label))

    while True:
        command = click.prompt(
            f"{session.start_label.lower()} | <column> <row> | board | quit",
            default="",
            show_default=False,
        ).strip().lower()

        if command in ("quit", "exit", "q"):
            break
        if command in ("restart", "start", "retry"):
            if _start(session):
                click.echo(session.board.render_text(config.tile_label))
            continue
        if session.board is None:
            click.echo("No board yet. Type 'restart' to build one.")
            continue
        if command == "board":
            click.echo(session.board.render_text(config.tile_label))
            continue

        parts = command.split()
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            click.echo("Enter a column and row number, e.g. '1 3'.")
            continue

        column, row = (int(p) for p in parts)
        try:
            result = session.advance(column - 1, row - 1)
        except IndexOutOfRangeError:
            click.echo(
                f"No tile at column {column}, row {row} "
                f"(board is {session.board.num_categories}x{session.board.clues_per_category})."
            )
            continue

        if isinstance(result, ShowText):
            click.echo(result.text)
        else:
            click.echo("That clue is finished.")

        if session.board.is_finished:
            click.echo("Board complete! Type 'restart' for a new one.")


@main.command()
@config_options
@click.option("--host", default="127.0.0.1", help="Interface to bind")
@click.option("--port", "-p", default=8080, help="Port to listen on")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
def serve(config_path, api_url, categories, clues, seed, host, port, debug):
    """Serve the board in a browser."""
    from .web import create_app

    config = load_config(config_path, api_url, categories, clues, seed)
    app = create_app(config)
    click.echo(f"Serving Jeopardy on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


@main.command("show-board")
@config_options
@click.option("--reveal", is_flag=True, help="Print questions and answers too")
@click.option("--json", "as_json", is_flag=True, help="Print the board as JSON")
def show_board(config_path, api_url, categories, clues, seed, reveal, as_json):
    """Build one board and print it."""
    config = load_config(config_path, api_url, categories, clues, seed)
    session = build_session(config)
    try:
        board = session.start()
    except (DataServiceError, InsufficientPoolError) as e:
        raise click.ClickException(f"Could not build a board: {e}") from e

    if as_json:
        click.echo(json.dumps(board.to_dict(include_hidden=reveal), indent=2))
        return

    click.echo(board.render_text(config.tile_label))
    if reveal:
        for category in board.categories:
            click.echo(f"\n{category.title}")
            for i, clue in enumerate(category.clues, start=1):
                click.echo(f"  {i}. {clue.question} -> {clue.answer}")


@main.command("create-config")
@click.option("--output", "-o", required=True, type=click.Path(), help="Output config file")
@config_options
def create_config(output, config_path, api_url, categories, clues, seed):
    """Create a game configuration file."""
    config = load_config(config_path, api_url, categories, clues, seed)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)

    click.echo(f"Config saved to {output_path}")
    click.echo(json.dumps(config.to_dict(), indent=2))


if __name__ == "__main__":
    main()

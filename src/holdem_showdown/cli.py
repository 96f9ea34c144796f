"""Command-line interface for evaluating showdowns."""

import json
import logging
import re
from typing import List, Optional, Sequence

import click

from .config.environment import get_config
from .config.settings import Settings, parse_setting
from .core.card import Card
from .core.exceptions import InvalidCardError, ShowdownError
from .game.game_result import ShowdownOutcome, format_summary
from .game.player import HOLE_CARDS
from .game.table import ShowdownTable
from .storage import JsonStore

CARD_SEPARATORS = re.compile(r"[\s,]+")


def split_codes(text: str) -> List[str]:
    """Split 'Ah Kh', 'Ah,Kh' or 'AhKh' into two-character card codes."""
    compact = CARD_SEPARATORS.sub("", text or "")
    if len(compact) % 2:
        raise InvalidCardError(f"Incomplete card code in {text!r}")
    return [compact[i:i + 2] for i in range(0, len(compact), 2)]


def render_card(card: Optional[Card], settings: Settings) -> str:
    """Display form of a card; hearts and diamonds are styled red."""
    if card is None:
        return "--"
    text = card.display(show_suit=settings.show_card_suits)
    if card.suit.is_red:
        return click.style(text, fg="red")
    return text


def render_cards(cards: Sequence[Optional[Card]], settings: Settings) -> str:
    return " ".join(render_card(card, settings) for card in cards)


def apply_board(table: ShowdownTable, board: str) -> None:
    codes = split_codes(board)
    if len(codes) > len(table.community):
        raise click.BadParameter(f"at most {len(table.community)} cards", param_hint="--board")
    table.set_community(codes)


def echo_outcome(outcome: ShowdownOutcome, settings: Settings, show_cards: bool, as_json: bool) -> None:
    """Print the results, or the validation message and exit with status 1."""
    if as_json:
        click.echo(json.dumps(outcome.to_json(), indent=2, ensure_ascii=False))
    elif outcome.success:
        if show_cards:
            for result in outcome.results:
                cards = render_cards(result.hand.cards, settings) if result.hand else ""
                click.echo(f"{result} [{cards}]")
        else:
            click.echo(format_summary(outcome.results))
    if not outcome.success:
        if not as_json:
            click.echo(outcome.error.message, err=True)
        raise click.exceptions.Exit(1)


def load_table(store: JsonStore) -> ShowdownTable:
    try:
        return ShowdownTable.from_json([player.to_json() for player in store.load_players()])
    except ShowdownError as e:
        raise click.ClickException(f"Saved players are invalid: {e}")


@click.group()
@click.option('--data-dir', type=click.Path(file_okay=False), default=None,
              help='Directory for saved players and settings')
@click.option('--config', 'config_name', default=None, help='Configuration to use')
@click.pass_context
def cli(ctx, data_dir, config_name):
    """Texas hold'em showdown evaluator."""
    cfg = get_config(config_name)
    logging.basicConfig(level=cfg.LOG_LEVEL, format=cfg.LOG_FORMAT)
    ctx.obj = JsonStore(data_dir, config=cfg)


@cli.command()
@click.option('--player', '-p', 'player_specs', multiple=True, metavar='NAME:CARDS',
              help='Player and hole cards, e.g. "Alice:AhKh"')
@click.option('--board', '-b', default='', help='Community cards, e.g. "Qh Jh Th 3s 3c"')
@click.option('--show-cards', is_flag=True, help='Show the cards making each best hand')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.pass_obj
def evaluate(store, player_specs, board, show_cards, as_json):
    """Evaluate the given players against the board."""
    table = ShowdownTable()
    try:
        for spec in player_specs:
            name, _, cards = spec.rpartition(':')
            if not name:
                raise click.BadParameter(f"expected NAME:CARDS, got {spec!r}", param_hint='--player')
            table.add_player(name)
            seat = len(table.players) - 1
            codes = split_codes(cards)
            if len(codes) > HOLE_CARDS:
                raise click.BadParameter(
                    f"at most {HOLE_CARDS} hole cards, got {spec!r}", param_hint='--player'
                )
            for index, code in enumerate(codes):
                table.set_player_card(seat, index, code)
        apply_board(table, board)
    except ShowdownError as e:
        raise click.ClickException(str(e))

    echo_outcome(table.evaluate(), store.load_settings(), show_cards, as_json)


@cli.command()
@click.option('--board', '-b', default='', help='Community cards, e.g. "Qh Jh Th 3s 3c"')
@click.option('--show-cards', is_flag=True, help='Show the cards making each best hand')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.pass_obj
def show(store, board, show_cards, as_json):
    """Evaluate the saved players against the board."""
    table = load_table(store)
    try:
        apply_board(table, board)
    except ShowdownError as e:
        raise click.ClickException(str(e))

    echo_outcome(table.evaluate(), store.load_settings(), show_cards, as_json)


@cli.command()
@click.option('--board', '-b', default='', help='Community cards already chosen')
@click.pass_obj
def available(store, board):
    """List the cards not yet held by a saved player or on the board."""
    table = load_table(store)
    try:
        apply_board(table, board)
    except ShowdownError as e:
        raise click.ClickException(str(e))
    click.echo(render_cards(table.available_cards(), store.load_settings()))


@cli.group()
def players():
    """Manage the saved players."""
    pass


@players.command('add')
@click.argument('name')
@click.pass_obj
def add_player(store, name):
    """Add a player with no cards."""
    table = load_table(store)
    try:
        player = table.add_player(name)
    except ShowdownError as e:
        raise click.ClickException(str(e))
    store.save_players(table.players)
    click.echo(f"Added {player.name}")


@players.command('set-card')
@click.argument('name')
@click.argument('slot', type=click.IntRange(1, HOLE_CARDS))
@click.argument('code', default='')
@click.pass_obj
def set_card(store, name, slot, code):
    """Give a player a hole card; an empty CODE clears the slot."""
    table = load_table(store)
    try:
        card = table.set_player_card(table.find_player(name), slot - 1, code)
    except ValueError as e:
        raise click.ClickException(str(e))
    store.save_players(table.players)
    click.echo(f"{name} card {slot}: {render_card(card, store.load_settings())}")


@players.command('remove')
@click.argument('name')
@click.pass_obj
def remove_player(store, name):
    """Remove a player."""
    table = load_table(store)
    try:
        table.remove_player(table.find_player(name))
    except ValueError as e:
        raise click.ClickException(str(e))
    store.save_players(table.players)
    click.echo(f"Removed {name}")


@players.command('list')
@click.pass_obj
def list_players(store):
    """Show the saved players and their cards."""
    settings = store.load_settings()
    saved = store.load_players()
    if not saved:
        click.echo("No players")
        return
    for player in saved:
        click.echo(f"{player.name}: {render_cards(player.cards, settings)}")


@players.command('clear')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_obj
def clear_players(store, yes):
    """Remove all saved players and their cards."""
    if yes or click.confirm('This will remove all players. Are you sure?'):
        store.clear_players()
        click.echo("All cards cleared and saved data reset!")
    else:
        click.echo("Operation cancelled.")


@cli.group()
def settings():
    """Show or change display settings."""
    pass


@settings.command('show')
@click.pass_obj
def show_settings(store):
    """Print the current settings."""
    for key, value in store.load_settings().to_json().items():
        click.echo(f"{key}: {value}")


@settings.command('set')
@click.argument('name', type=click.Choice(['dark-mode', 'show-card-suits', 'card-size']))
@click.argument('value')
@click.pass_obj
def set_setting(store, name, value):
    """Change one setting."""
    try:
        updated = store.load_settings().with_updates(**parse_setting(name, value))
    except ShowdownError as e:
        raise click.ClickException(str(e))
    store.save_settings(updated)
    click.echo(f"{name} = {value}")


def main():
    cli()


if __name__ == '__main__':
    main()

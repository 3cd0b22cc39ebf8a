"""Command-line interface for scoring five-card poker hands."""

import json

import click

from .config import get_config, setup_logging
from .core.hand import Hand
from .errors import PokerError
from .evaluation.hand_description import describer, format_result
from .game.showdown_manager import best_hand


@click.group()
@click.option('--config', 'config_name', default=None, help='Configuration to use')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
              help='Override the configured log level')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.pass_context
def cli(ctx, config_name, log_level, as_json):
    """Five-card poker hand evaluator."""
    config_class = get_config(config_name)
    try:
        setup_logging(log_level.upper() if log_level else None, config_class)
    except ValueError as e:
        raise click.UsageError(f"Invalid log level: {e}")
    ctx.obj = {
        'config': config_class,
        'json': as_json or config_class.OUTPUT_FORMAT == 'json',
    }


@cli.command()
@click.argument('hands', nargs=-1, required=True)
@click.pass_context
def showdown(ctx, hands):
    """Find the winning hand. Each HAND is five quoted tokens, e.g. "2S 4C 7S 9H 10H"."""
    try:
        result = best_hand([Hand.from_string(hand) for hand in hands])
    except PokerError as e:
        raise click.UsageError(str(e))

    if ctx.obj['json']:
        click.echo(json.dumps(result.to_json()))
    else:
        click.echo(format_result(result))


@cli.command()
@click.argument('hand')
@click.pass_context
def classify(ctx, hand):
    """Show the category of a single HAND."""
    try:
        parsed = Hand.from_string(hand)
    except PokerError as e:
        raise click.UsageError(str(e))

    config_class = ctx.obj['config']
    payload = {
        'hand': str(parsed),
        'category': describer.describe_hand(parsed),
        'tie_break': describer.describe_ranks(parsed),
    }
    if config_class.DETAILED_DESCRIPTIONS:
        payload['description'] = describer.describe_hand_detailed(parsed)

    if ctx.obj['json']:
        click.echo(json.dumps(payload))
        return

    click.echo(f"{payload['hand']}: {payload['category']}")
    if 'description' in payload:
        click.echo(f"  {payload['description']}")
    click.echo(f"  Tie-break: {' '.join(payload['tie_break'])}")


def main():
    cli()


if __name__ == '__main__':
    main()

"""Invert and check commands: from a color back to its index."""

from typing import Optional

import click

from chromaseq.models import CheckRequest, InversionStrategy, InvertRequest

from ..context import SEED, CliContext, cli_errors, echo_json, parse_params, pass_cli_context


@click.command()
@click.argument('hex_color', metavar='HEX')
@click.argument('method', required=False)
@click.option('--seed', type=SEED, default=None, help='Seed used to generate the color')
@click.option('--max-search', type=click.IntRange(min=0), default=None, help='Highest index to try')
@click.option('--tolerance', type=click.FloatRange(min=0.0, min_open=True), default=None, help='Match distance in the RGB cube')
@click.option(
    '--strategy',
    type=click.Choice([s.value for s in InversionStrategy], case_sensitive=False),
    default=None,
    help='Report the first match or the nearest one'
)
@click.option('--workers', type=click.IntRange(min=1, max=64), default=None, help='Threads used to split the scan')
@click.option('-p', '--param', 'params', multiple=True, metavar='KEY=VALUE', help='Method parameter')
@click.option('--json', 'as_json', is_flag=True, help='Print the response as JSON')
@pass_cli_context
@cli_errors
def invert(
    obj: CliContext,
    hex_color: str,
    method: Optional[str],
    seed,
    max_search: Optional[int],
    tolerance: Optional[float],
    strategy: Optional[str],
    workers: Optional[int],
    params: tuple[str, ...],
    as_json: bool,
):
    """
    Find the index at which METHOD produced HEX.

    \b
    Examples:
      chromaseq invert '#851BE4' plastic --seed 42
      chromaseq invert D4832B plastic --seed 42 --strategy nearest
    """
    response = obj.service.invert(
        InvertRequest(
            hex=hex_color,
            method=method,
            params=parse_params(params),
            seed=seed,
            max_search=max_search,
            tolerance=tolerance,
            strategy=strategy.lower() if strategy else None,
            workers=workers,
        )
    )

    if as_json:
        echo_json(response.model_dump(mode="json"))
        return

    if response.found:
        click.echo(f"{response.hex} -> index {response.index} ({response.method}, seed={response.seed})")
        click.echo(f"  Distance:     {response.distance:.6f}")
        click.echo(f"  Verification: {response.verification}")
        click.echo(f"  Searched:     {response.searched}")
    else:
        click.echo(f"{response.hex} not found for {response.method} (seed={response.seed})")
        click.echo(f"  Closest distance: {response.distance:.6f}")
        click.echo(f"  Searched:         {response.searched}")


@click.command()
@click.argument('index', type=click.IntRange(min=0))
@click.argument('hex_color', metavar='HEX')
@click.argument('method', required=False)
@click.option('--seed', type=SEED, default=None, help='Seed used to generate the color')
@click.option('--tolerance', type=click.FloatRange(min=0.0, min_open=True), default=None, help='Match distance in the RGB cube')
@click.option('-p', '--param', 'params', multiple=True, metavar='KEY=VALUE', help='Method parameter')
@click.option('--json', 'as_json', is_flag=True, help='Print the response as JSON')
@pass_cli_context
@cli_errors
def check(
    obj: CliContext,
    index: int,
    hex_color: str,
    method: Optional[str],
    seed,
    tolerance: Optional[float],
    params: tuple[str, ...],
    as_json: bool,
):
    """
    Check whether HEX is the color METHOD predicts at INDEX.

    \b
    Example:
      chromaseq check 69 '#D4832B' plastic --seed 42
    """
    result = obj.service.check(
        CheckRequest(
            index=index,
            hex=hex_color,
            method=method,
            params=parse_params(params),
            seed=seed,
            tolerance=tolerance,
        )
    )

    if as_json:
        echo_json(result.model_dump(mode="json"))
        return

    status = "MATCH" if result.matches else "MISMATCH"
    click.echo(f"[{status}] index {result.index}: predicted {result.predicted}, observed {result.observed}")
    click.echo(f"  Distance: {result.distance:.6f} (tolerance {result.tolerance})")

"""Compare command: rank methods by uniformity."""

from typing import Optional

import click

from chromaseq.models import CompareRequest

from ..context import SEED, CliContext, cli_errors, echo_json, pass_cli_context


@click.command()
@click.option('-n', '--length', 'n', type=click.IntRange(min=1), default=None, help='Points per method (default from config)')
@click.option('-m', '--method', 'methods', multiple=True, help='Method to include (repeatable; default: golden, plastic, halton, kronecker, sobol)')
@click.option('--seed', type=SEED, default=None, help='Seed for every method')
@click.option('--json', 'as_json', is_flag=True, help='Print the response as JSON')
@pass_cli_context
@cli_errors
def compare(obj: CliContext, n: Optional[int], methods: tuple[str, ...], seed, as_json: bool):
    """Rank methods by the gap dispersion of their first coordinate (lower is more uniform)."""
    response = obj.service.compare(CompareRequest(n=n, methods=list(methods) or None, seed=seed))

    if as_json:
        echo_json(response.model_dump(mode="json"))
        return

    click.echo(f"Gap dispersion over {response.n} points (lower = more uniform):\n")
    for rank, name in enumerate(response.ranking, start=1):
        click.echo(f"  {rank}. {name:<28} {response.discrepancy[name]:.6f}")
    click.echo(f"\nBest: {response.best}   Worst: {response.worst}")

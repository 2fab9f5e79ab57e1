"""Generate command: print a run of colors."""

from typing import Optional

import click

from chromaseq.core import discrepancy, hex_collisions, mean_pairwise_distance, primary_stream
from chromaseq.models import GenerateRequest, build_method
from chromaseq.sequences import generate_sequence

from ..context import SEED, CliContext, cli_errors, echo_json, parse_params, pass_cli_context


@click.command()
@click.argument('method', required=False)
@click.option('-n', '--count', type=click.IntRange(min=0), default=10, show_default=True, help='Number of colors')
@click.option('--seed', type=SEED, default=None, help='Seed (integer of any size or float; default from config)')
@click.option('--start', type=click.IntRange(min=0), default=None, help="First index (default: the method's start index)")
@click.option('-p', '--param', 'params', multiple=True, metavar='KEY=VALUE', help='Method parameter, e.g. -p bases=[2,3,7]')
@click.option('--json', 'as_json', is_flag=True, help='Print the response as JSON')
@click.option('--stats', is_flag=True, help='Also print uniformity statistics for the run')
@pass_cli_context
@cli_errors
def generate(
    obj: CliContext,
    method: Optional[str],
    count: int,
    seed,
    start: Optional[int],
    params: tuple[str, ...],
    as_json: bool,
    stats: bool,
):
    """
    Generate COUNT colors from METHOD.

    \b
    Methods: golden, plastic, halton, r_sequence, kronecker, sobol,
             pisot, continued_fraction (alias: cf)

    \b
    Examples:
      chromaseq generate plastic -n 5 --seed 42
      chromaseq generate kronecker -p alpha=3.14159 --json
      chromaseq generate cf -p cf=e
    """
    response = obj.service.generate(
        GenerateRequest(method=method, params=parse_params(params), seed=seed, count=count, start=start)
    )

    summary = None
    if stats and response.colors:
        method_obj = build_method(method or obj.config.default_method, parse_params(params))
        colors = generate_sequence(method_obj, count, response.seed, response.start)
        summary = {
            "mean_pairwise_distance": mean_pairwise_distance(colors),
            "hex_collisions": hex_collisions(response.colors),
            "gap_dispersion": discrepancy(primary_stream(method_obj, count, response.seed)),
        }

    if as_json:
        data = response.model_dump(mode="json")
        if summary is not None:
            data["stats"] = summary
        echo_json(data)
        return

    click.echo(f"{response.method} (seed={response.seed})")
    for offset, color in enumerate(response.colors):
        click.echo(f"  {response.start + offset:>6}  {color}")

    if summary is not None:
        click.echo("\nStatistics:")
        click.echo(f"  Mean pairwise distance: {summary['mean_pairwise_distance']:.4f}")
        click.echo(f"  Hex collisions:         {summary['hex_collisions']}")
        click.echo(f"  Gap dispersion:         {summary['gap_dispersion']:.6f}")

"""JSON tool commands: one-shot request and a JSON-lines loop."""

import json
import logging
import sys
from typing import Any, Optional

import click

from ..context import CliContext, cli_errors, pass_cli_context

logger = logging.getLogger(__name__)


def _internal_error(tool: Optional[str], error: Exception) -> dict[str, Any]:
    return {
        "error": f"Internal error: {error}",
        "error_type": type(error).__name__,
        "tool": tool,
    }


def _decode_error(tool: Optional[str], error: Exception) -> dict[str, Any]:
    return {
        "error": f"Request is not valid JSON: {error}",
        "error_type": "InvalidParameterError",
        "tool": tool,
        "recovery_hint": 'Send a JSON object, e.g. {"method": "plastic", "count": 5}',
    }


@click.command()
@click.argument('tool')
@click.argument('payload', required=False, default='{}')
@pass_cli_context
@cli_errors
def request(obj: CliContext, tool: str, payload: str):
    """
    Run one JSON tool call and print the JSON response.

    TOOL is generate, invert, compare or check. PAYLOAD is a JSON object,
    or '-' to read it from stdin. Exits with code 1 when the response is
    an error.

    \b
    Example:
      chromaseq request invert '{"hex": "#851BE4", "method": "plastic", "seed": 42}'
    """
    if payload == '-':
        payload = click.get_text_stream('stdin').read()

    try:
        params = json.loads(payload) if payload.strip() else {}
    except json.JSONDecodeError as e:
        response = _decode_error(tool, e)
    else:
        response = obj.service.handle_request(tool, params)

    click.echo(json.dumps(response, indent=2))
    if "error" in response:
        sys.exit(1)


@click.command()
@pass_cli_context
@cli_errors
def serve(obj: CliContext):
    """
    Answer JSON-lines tool calls on stdin until EOF.

    Each input line is {"tool": NAME, "params": {...}}; each output line is
    the JSON response. Blank lines are skipped.
    """
    service = obj.service
    stdin = click.get_text_stream('stdin')
    logger.info(f"Serving tools: {', '.join(service.tools)}")

    handled = 0
    for line in stdin:
        line = line.strip()
        if not line:
            continue

        try:
            message = json.loads(line)
        except json.JSONDecodeError as e:
            response = _decode_error(None, e)
        else:
            tool, params = (message.get("tool"), message.get("params")) if isinstance(message, dict) else (None, message)
            # One failing request must not end the loop
            try:
                response = service.handle_request(tool, params)
            except Exception as e:
                logger.exception(f"Request {tool!r} failed unexpectedly")
                response = _internal_error(tool, e)

        click.echo(json.dumps(response))
        sys.stdout.flush()
        handled += 1

    logger.info(f"Input closed after {handled} requests")

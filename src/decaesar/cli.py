from typing import Optional

import click
from rich.console import Console

from decaesar.errors import DecaesarError
from decaesar.frequency import ALPHABET_SIZE
from decaesar.log_config import LOG_LEVELS, configure_logging
from decaesar.rotation import decode, encode
from decaesar.search import break_cipher
from decaesar.ui import show_results
from decaesar.utils import INPUT_FORMATS, InputFormat, as_bytes, format_output, load_input


def read_input(input_path: Optional[str], input_format: InputFormat, text: Optional[str]) -> bytes:
    """Pick the input from --text or a file, exactly one of them."""
    if (input_path is None) == (text is None):
        raise click.UsageError("Provide exactly one of --input-path or --text")
    if text is not None:
        return as_bytes(text)
    try:
        return load_input(input_path, input_format)
    except ValueError as e:
        raise click.ClickException(f"Could not read {input_format} input from {input_path}: {e}")


def output_option(fn):
    return click.option(
        "--output-format",
        "-o",
        type=click.Choice(INPUT_FORMATS),
        default="raw",
        help="Encoding of the printed result",
    )(fn)


def input_options(fn):
    fn = click.option("--text", "-t", default=None, help="Literal input text")(fn)
    fn = click.option(
        "--input-format",
        "-f",
        type=click.Choice(INPUT_FORMATS),
        default="raw",
    )(fn)
    fn = click.option("--input-path", "-i", default=None, type=click.Path(exists=True))(fn)
    return fn


@click.group()
@click.option("--log-level", "-l", type=click.Choice(LOG_LEVELS), default="warning", envvar="DECAESAR_LOG_LEVEL")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(log_level: str, json_logs: bool):
    configure_logging(log_level, json=json_logs)


@cli.command()
@input_options
@click.option("--top", "-n", type=click.IntRange(1, ALPHABET_SIZE), default=5, envvar="DECAESAR_TOP")
def crack(input_path: Optional[str], input_format: InputFormat, text: Optional[str], top: int):
    """Find the most likely shift and show the ranked candidates."""
    data = read_input(input_path, input_format, text)
    try:
        result = break_cipher(data)
    except DecaesarError as e:
        raise click.ClickException(str(e))

    show_results(Console(), data, result, top)


@cli.command("decode")
@click.argument("shift", type=int)
@input_options
@output_option
def decode_cmd(
    shift: int,
    input_path: Optional[str],
    input_format: InputFormat,
    text: Optional[str],
    output_format: InputFormat,
):
    """Rotate the input forward by SHIFT."""
    data = read_input(input_path, input_format, text)
    try:
        output = decode(data, shift)
    except DecaesarError as e:
        raise click.ClickException(str(e))
    click.echo(format_output(output, output_format))


@cli.command("encode")
@click.argument("shift", type=int)
@input_options
@output_option
def encode_cmd(
    shift: int,
    input_path: Optional[str],
    input_format: InputFormat,
    text: Optional[str],
    output_format: InputFormat,
):
    """Encode the input with key SHIFT (the inverse of decode)."""
    data = read_input(input_path, input_format, text)
    try:
        output = encode(data, shift)
    except DecaesarError as e:
        raise click.ClickException(str(e))
    click.echo(format_output(output, output_format))


@cli.command("demo-api")
@click.option("--host", default="127.0.0.1", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to bind the server to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def demo_api(host: str, port: int, reload: bool):
    """Start the demo API server."""
    import uvicorn
    from demo_api.api import app

    click.echo(f"Starting demo API server on http://{host}:{port}")
    click.echo("Available endpoints:")
    click.echo("  - GET  /api/demo   - Encoded demo sentence")
    click.echo("  - POST /api/crack  - Find the most likely shift")
    click.echo("  - POST /api/decode - Decode with a known shift")
    click.echo("  - POST /api/encode - Encode with a key")
    click.echo("\nPress Ctrl+C to stop the server")

    if reload:
        # Reload mode needs an import string.
        uvicorn.run("demo_api.api:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    cli()

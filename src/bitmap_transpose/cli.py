"""Command-line interface for transposing bitmap files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import DEFAULT_C_ARRAY_NAME, DEFAULT_ELEMENT_BITS, DEFAULT_PACKED
from .errors import TransposeError
from .formats import OutputFormat, render_bitmap, to_c_array, to_hex
from .logging_utils import LogLevel, configure_logging
from .transpose import transpose
from .variants import VARIANTS

logger = logging.getLogger(__name__)

app = typer.Typer(help="Transpose row-major bitmaps into column-major order for display controllers.")


def _read_input(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        typer.echo(f"Input file not found: {path}", err=True)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.info("Read %d bytes from %s", len(data), path)
    return data


def _write_output(path: Path, payload) -> None:
    try:
        if isinstance(payload, bytes):
            path.write_bytes(payload)
        else:
            path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _transpose_or_exit(data: bytes, width: int, height: int, bits: int, packed: bool) -> bytes:
    try:
        return transpose(data, width, height, element_bits=bits, packed=packed)
    except TransposeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.callback()
def main_options(
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Set log verbosity."
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity."),
    quiet: int = typer.Option(0, "--quiet", "-q", count=True, help="Reduce log verbosity."),
) -> None:
    configure_logging(log_level=log_level, verbose=verbose, quiet=quiet)


@app.command("variants")
def list_variants() -> None:
    """List the transpose variants and their output sizes."""
    for variant in VARIANTS.values():
        typer.echo(f"- {variant.kind.value}: {variant.title} (output bytes = {variant.size_formula})")


@app.command()
def convert(
    input_path: Path = typer.Argument(..., help="Row-major input file."),
    output: str = typer.Argument("-", help="Destination file, or '-' for stdout."),
    width: int = typer.Option(..., "--width", help="Elements per input row."),
    height: int = typer.Option(..., "--height", help="Number of input rows."),
    bits: int = typer.Option(DEFAULT_ELEMENT_BITS, "--bits", "-b", help="Bits per element (1 or 8)."),
    packed: bool = typer.Option(DEFAULT_PACKED, "--packed", help="Drop row padding from 1-bit output."),
    fmt: OutputFormat = typer.Option(OutputFormat.RAW, "--format", "-f", help="Output encoding."),
    name: str = typer.Option(DEFAULT_C_ARRAY_NAME, "--name", help="Array name for --format c."),
) -> None:
    """Transpose INPUT and write the result to OUTPUT."""
    result = _transpose_or_exit(_read_input(input_path), width, height, bits, packed)

    if fmt is OutputFormat.RAW:
        if output == "-":
            typer.echo(result, nl=False)
        else:
            _write_output(Path(output), result)
    else:
        try:
            text = to_c_array(result, name) if fmt is OutputFormat.C else to_hex(result) + "\n"
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        if output == "-":
            typer.echo(text, nl=False)
        else:
            _write_output(Path(output), text)

    if output != "-":
        typer.echo(f"Wrote {len(result)} bytes to {output}", err=True)


@app.command()
def preview(
    input_path: Path = typer.Argument(..., help="Row-major 1-bit input file."),
    width: int = typer.Option(..., "--width", help="Pixels per input row."),
    height: int = typer.Option(..., "--height", help="Number of input rows."),
    transposed: bool = typer.Option(False, "--transposed", "-t", help="Show the transposed bitmap."),
) -> None:
    """Print a 1-bit bitmap as text."""
    data = _read_input(input_path)
    if transposed:
        data = _transpose_or_exit(data, width, height, 1, False)
        width, height = height, width
    try:
        typer.echo(render_bitmap(data, width, height))
    except TransposeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def main(argv: Optional[list[str]] = None) -> None:
    app(argv or sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    main()

"""Command line entry point: print the secret of each share payload file."""

from __future__ import annotations

import logging

import click

from ssr.decoding import load_payload
from ssr.errors import ReconstructionError
from ssr.reconstruct import calculate_secret


def _parse_prime(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value, 0)
    except ValueError as exc:
        raise click.BadParameter(f"not an integer: {value}") from exc


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--prime",
    callback=_parse_prime,
    help="Field modulus (decimal or 0x-hex). Chosen from the share values if omitted.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(files: tuple[str, ...], prime: int | None, verbose: bool) -> None:
    """Reconstruct the secret of each JSON share payload in FILES."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for path in files:
        try:
            secret = calculate_secret(load_payload(path), prime)
        except ReconstructionError as e:
            click.echo(f"Error: {path}: {e}", err=True)
            raise SystemExit(1) from e
        click.echo(f"{path}: {secret}")


if __name__ == "__main__":
    main()

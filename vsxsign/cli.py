"""vsxsign CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from vsxsign import __version__
from vsxsign.errors import VerifyOutcome, VsxSignError
from vsxsign.service import SIGNED_ARCHIVE_NAME, sign_extension, verify_extension

app = typer.Typer(
    name="vsxsign",
    help="Sign and verify VS Code extension packages",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"vsxsign version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("vsxsign")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Detached signatures for extension packages."""
    _configure_logging(verbose)


@app.command("sign")
def sign(
    extension_package: Annotated[
        Path,
        typer.Argument(help="Path to the .vsix file of the extension"),
    ],
    private_key: Annotated[
        Path,
        typer.Argument(help="Path to the PEM private key used to sign the extension"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help=f"Destination of the signature file (defaults to ./{SIGNED_ARCHIVE_NAME})",
        ),
    ] = None,
) -> None:
    """Sign an extension package."""
    try:
        destination = sign_extension(extension_package, private_key, output)
    except (OSError, VsxSignError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Signature file created at {destination}")


@app.command("verify")
def verify(
    extension_package: Annotated[
        Path,
        typer.Argument(help="Path to the .vsix file of the extension"),
    ],
    signature_archive: Annotated[
        Path,
        typer.Argument(help="Signature file (.sigzip) of the extension"),
    ],
    public_key: Annotated[
        Path | None,
        typer.Option(
            "--public-key",
            "-p",
            help="PEM public key (downloaded from the registry when omitted)",
        ),
    ] = None,
    public_key_id: Annotated[
        str | None,
        typer.Option("--public-key-id", help="Registry ID of the public key to download"),
    ] = None,
    registry_url: Annotated[
        str | None,
        typer.Option("--registry-url", help="Registry used to resolve --public-key-id"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output result as JSON"),
    ] = False,
) -> None:
    """Verify an extension package against its signature.

    Exit codes: 0 valid, 3 package not found, 6 signature not found,
    102 signature not valid, 1 any other error.
    """
    if public_key is not None and public_key_id is not None:
        raise typer.BadParameter("Use either --public-key or --public-key-id, not both.")

    result = verify_extension(
        extension_package,
        signature_archive,
        public_key,
        public_key_id=public_key_id,
        registry_url=registry_url,
    )

    if json_output:
        from vsxsign.utils.cli_output import json_response

        typer.echo(
            json_response(
                "signature_verification",
                1,
                package=str(extension_package),
                signature=str(signature_archive),
                valid=result.valid,
                outcome=result.outcome.value,
                message=result.message,
            )
        )
    elif result.outcome is VerifyOutcome.VALID:
        typer.secho(result.message, fg=typer.colors.GREEN)
    elif result.outcome is VerifyOutcome.INFRASTRUCTURE:
        typer.secho(f"Error: {result.message}", fg=typer.colors.RED, err=True)
    else:
        typer.secho(result.message, fg=typer.colors.RED)

    if not result.valid:
        raise typer.Exit(code=result.exit_code)


if __name__ == "__main__":
    app()

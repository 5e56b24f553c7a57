"""
Base58Check - Command Line Interface
======================================
Encode and decode Base58 / Base58Check from the shell.

Commands:
- encode: Base58 encode text or hex
- decode: Base58 decode to hex or text
- encode-check: Base58Check encode with a version prefix
- decode-check: verify and split a Base58Check string
- validate: check Base58 / Base58Check text
- version: show package version
"""

import typer
from typing import NoReturn, Optional
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape

# Internal imports
from base58check.codec import Base58Check
from base58check.config import get_settings
from base58check.errors import Base58CheckException
from base58check.logging_setup import setup_logging, get_logger, PerformanceLogger
from base58check.utils.serialization import hex_to_bytes
from base58check.utils.validators import validate_base58
from base58check.version import get_version_string


# ============================================================================
# CLI APP
# ============================================================================

app = typer.Typer(
    name="base58check",
    help="Base58 / Base58Check encoder and decoder",
    add_completion=False
)

console = Console()
logger = get_logger("cli")


def _codec() -> Base58Check:
    return Base58Check.from_settings(get_settings())


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def _read_input(data: str, as_hex: bool) -> bytes:
    if not as_hex:
        return data.encode("utf-8")
    try:
        return hex_to_bytes(data)
    except ValueError as e:
        _fail(str(e))


# ============================================================================
# BASE58 COMMANDS
# ============================================================================

@app.command("encode")
def encode_command(
    data: str = typer.Argument(..., help="Data to encode (UTF-8 text unless --hex)"),
    as_hex: bool = typer.Option(False, "--hex", help="Interpret DATA as hex bytes"),
):
    """Base58 encode DATA"""
    raw = _read_input(data, as_hex)

    with PerformanceLogger(logger, "encode", extra_data={"length": len(raw)}):
        encoded = _codec().encode(raw)

    console.print(encoded, soft_wrap=True, highlight=False)


@app.command("decode")
def decode_command(
    text: str = typer.Argument(..., help="Base58 text"),
    as_text: bool = typer.Option(False, "--text", help="Print decoded bytes as UTF-8 text"),
):
    """Base58 decode TEXT (prints hex by default)"""
    try:
        with PerformanceLogger(logger, "decode", extra_data={"length": len(text)}):
            decoded = _codec().decode(text)
    except Base58CheckException as e:
        _fail(str(e))

    if as_text:
        try:
            output = decoded.decode("utf-8")
        except UnicodeDecodeError:
            _fail("Decoded bytes are not valid UTF-8, omit --text to print hex")
    else:
        output = decoded.hex()

    console.print(output, soft_wrap=True, highlight=False, markup=False)


# ============================================================================
# BASE58CHECK COMMANDS
# ============================================================================

@app.command("encode-check")
def encode_check_command(
    payload: str = typer.Argument(..., help="Payload (UTF-8 text unless --hex)"),
    prefix: str = typer.Option("00", "--prefix", "-p", help="Version prefix as hex"),
    as_hex: bool = typer.Option(False, "--hex", help="Interpret PAYLOAD as hex bytes"),
):
    """Base58Check encode PAYLOAD with a version PREFIX"""
    try:
        prefix_bytes = hex_to_bytes(prefix)
    except ValueError as e:
        _fail(f"Invalid prefix: {e}")

    codec = _codec()

    try:
        if as_hex:
            encoded = codec.encode_check_hex(prefix_bytes, payload)
        else:
            encoded = codec.encode_check(prefix_bytes, payload.encode("utf-8"))
    except Base58CheckException as e:
        _fail(str(e))

    console.print(encoded, soft_wrap=True, highlight=False)


@app.command("decode-check")
def decode_check_command(
    text: str = typer.Argument(..., help="Base58Check text"),
    prefix_length: Optional[int] = typer.Option(
        None,
        "--prefix-length",
        "-l",
        min=0,
        help="Version prefix bytes (default from BASE58CHECK_PREFIX_LENGTH, else 1)"
    ),
):
    """Verify TEXT and print its prefix and payload as hex"""
    try:
        with PerformanceLogger(logger, "decode_check", extra_data={"length": len(text)}):
            result = _codec().decode_check(text, prefix_length)
    except Base58CheckException as e:
        _fail(str(e))

    console.print(f"prefix: {result.prefix.hex()}", soft_wrap=True, highlight=False)
    console.print(f"payload: {result.payload.hex()}", soft_wrap=True, highlight=False)


@app.command("validate")
def validate_command(
    text: str = typer.Argument(..., help="Text to validate"),
    check: bool = typer.Option(False, "--check", "-c", help="Also verify the Base58Check checksum"),
    prefix_length: Optional[int] = typer.Option(None, "--prefix-length", "-l", min=0),
):
    """Exit 0 if TEXT is valid, 1 otherwise"""
    if not validate_base58(text):
        _fail("not a Base58 string")

    if check:
        try:
            _codec().decode_check(text, prefix_length)
        except Base58CheckException as e:
            _fail(str(e))

    console.print("[green]valid[/green]")


@app.command("version")
def version_command():
    """Show version and active settings"""
    settings = get_settings()
    console.print(Panel.fit(
        f"Version: [cyan]{get_version_string()}[/cyan]\n"
        f"Prefix length: [cyan]{settings.prefix_length}[/cyan]\n"
        f"Checksum: [cyan]{settings.hash_name} x2, {settings.checksum_length} bytes[/cyan]\n"
        f"Bitcoin alphabet: [cyan]{settings.uses_bitcoin_alphabet()}[/cyan]",
        title="Base58Check",
        border_style="green"
    ))


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output (DEBUG logging)"
    )
):
    """
    Base58 / Base58Check encoder and decoder.
    """
    settings = get_settings()
    setup_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
        log_format=settings.log_format,
    )


if __name__ == "__main__":
    app()


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "app",
]

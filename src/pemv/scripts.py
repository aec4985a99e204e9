# filename : scripts.py
# created  : 10/17/2026


import logging

import click

from pemv.core.logging import configure
from pemv.core.tlv.masking import DEFAULT_MASKING_CHARACTERS

lg = logging.getLogger(__name__)

# (option name, help); the option's dest doubles as the value kind.
_VALUE_OPTIONS = (
    ("--tlv", "TLV block, dialect detected automatically."),
    ("--ber-tlv", "BER-TLV block."),
    ("--ingenico", "Ingenico TLV block."),
    ("--tvr", "Terminal Verification Results (95)."),
    ("--tsi", "Transaction Status Information (9B)."),
    ("--cvm-results", "CVM Results (9F34)."),
    ("--cvm-list", "CVM List (8E)."),
    ("--cvr", "Card Verification Results (from CCD IAD)."),
    ("--iac", "Issuer Action Code (9F0D, 9F0E or 9F0F)."),
    ("--terminal-capabilities", "Terminal Capabilities (9F33)."),
    ("--service-code", "Service Code (5F30), as 3 digits or 2 bytes."),
)

_COLOUR = {"auto": None, "always": True, "never": False}


def _value_options(func):
    for name, help_text in reversed(_VALUE_OPTIONS):
        func = click.option(name, default=None, metavar="HEX", help=help_text)(func)
    return func


@click.command(context_settings={"auto_envvar_prefix": "PEMV"})
@_value_options
@click.option(
    "-m",
    "--masking-characters",
    default=DEFAULT_MASKING_CHARACTERS,
    show_default=True,
    help="Characters that stand for a masked nibble.",
)
@click.option(
    "--colour",
    type=click.Choice(list(_COLOUR)),
    default="auto",
    show_default=True,
    help="Colour severities in the output.",
)
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show dialect rejections).")
def pemv(masking_characters, colour, verbose, **values):
    """Decode EMV TLV data and the values inside it."""

    configure(verbose)

    given = {kind: text for kind, text in values.items() if text is not None}
    if len(given) != 1:
        names = ", ".join(name for name, _ in _VALUE_OPTIONS)
        raise click.UsageError(f"exactly one of {names} is required")
    ((kind, text),) = given.items()

    from pemv.app.main import main
    try:
        output = main(kind, text, masking_characters=masking_characters)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(output, color=_COLOUR[colour])

"""CLI application entry point for ssh-config-add.

This module is the **sole error boundary** for the application.  It
catches :class:`~ssh_config_add.exceptions.SshConfigAddError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, reporting them
on stderr via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — resolution and rendering are delegated
  to the core layer.
* stdout carries only the rendered configuration block; every
  diagnostic goes to stderr.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from ssh_config_add.cli import exit_codes
from ssh_config_add.cli.console import console
from ssh_config_add.core.renderer import render_config
from ssh_config_add.core.resolver import build_config
from ssh_config_add.exceptions import SshConfigAddError
from ssh_config_add.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    * ``ssh-config-add [-p PORT] [-I FILE] [-C] [-D user@hostname] HOST...``
    * ``ssh-config-add --version``
    """
    parser = argparse.ArgumentParser(
        prog="ssh-config-add",
        description="Generate SSH configuration",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-p",
        "--port",
        default=None,
        help="SSH port",
    )
    parser.add_argument(
        "-I",
        "--identity-file",
        dest="identity_file",
        default=None,
        help="Path to identity file",
    )
    parser.add_argument(
        "-C",
        "--compression",
        action="store_true",
        help="Enable compression",
    )
    parser.add_argument(
        "-D",
        "--destination",
        default=None,
        metavar="[user@]hostname",
        help="Destination; user and hostname are split on the first @ and used verbatim",
    )
    parser.add_argument(
        "host",
        nargs="+",
        help="One or more host aliases",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ssh-config-add CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = _build_parser().parse_intermixed_args(argv)

    record = build_config(
        args.host,
        destination=args.destination,
        port=args.port,
        identity_file=args.identity_file,
        compression=args.compression,
    )
    print(render_config(record))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except SshConfigAddError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}",
            highlight=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

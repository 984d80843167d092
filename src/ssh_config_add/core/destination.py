"""Parsing of the ``user@hostname`` destination argument."""

from __future__ import annotations

from ssh_config_add.exceptions import InvalidInputError


def parse_destination(destination: str) -> tuple[str, str]:
    """Split *destination* into ``(user, hostname)`` on the first ``@``.

    Any further ``@`` characters stay in the hostname.

    Raises
    ------
    InvalidInputError
        If *destination* contains no ``@``.
    """
    user, sep, hostname = destination.partition("@")
    if not sep:
        raise InvalidInputError(
            f"Expected user@hostname, got: {destination}",
            hint="Pass the destination as -D user@hostname.",
        )
    return user, hostname

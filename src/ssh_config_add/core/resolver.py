"""Build a :class:`ConfigRecord` from parsed command-line values."""

from __future__ import annotations

from collections.abc import Sequence

from ssh_config_add.core.destination import parse_destination
from ssh_config_add.core.models import ConfigRecord


def build_config(
    hosts: Sequence[str],
    *,
    destination: str | None = None,
    port: str | None = None,
    identity_file: str | None = None,
    compression: bool = False,
) -> ConfigRecord:
    """Resolve command-line values into an immutable record.

    *hosts* must be non-empty; the CLI guarantees this by requiring at
    least one positional argument.  When *destination* is given it is
    split into user and hostname, otherwise both stay ``None``.
    """
    user: str | None = None
    hostname: str | None = None
    if destination is not None:
        user, hostname = parse_destination(destination)

    return ConfigRecord(
        host=tuple(hosts),
        user=user,
        hostname=hostname,
        port=port,
        identity_file=identity_file,
        compression=compression,
    )

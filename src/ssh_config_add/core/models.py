"""Domain model for ssh-config-add.

:class:`ConfigRecord` is a **frozen** dataclass: built once from parsed
arguments, consumed once by the renderer, never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConfigRecord:
    """Structured form of a single SSH ``Host`` block."""

    host: tuple[str, ...]
    """Host aliases, in the order given.  Never empty."""

    user: str | None = None
    """Login user, derived from the destination."""

    hostname: str | None = None
    """Real host name or address, derived from the destination."""

    port: str | None = None
    """Port, passed through verbatim."""

    identity_file: str | None = None
    """Identity file path, passed through verbatim."""

    compression: bool = False
    """Whether to emit ``Compression yes``."""

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("ConfigRecord requires at least one host alias")
        if (self.user is None) != (self.hostname is None):
            raise ValueError("user and hostname must be set together")

    def as_context(self) -> dict[str, object]:
        """Return the template context for this record."""
        return {
            "host": list(self.host),
            "user": self.user,
            "hostname": self.hostname,
            "port": self.port,
            "identity_file": self.identity_file,
            "compression": self.compression,
        }

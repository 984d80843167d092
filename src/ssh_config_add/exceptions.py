"""Custom exception hierarchy for ssh-config-add.

Every error that reaches the CLI error boundary must inherit from
:class:`SshConfigAddError`.  Raw Jinja2 exceptions must NEVER propagate
beyond the renderer — they are caught and re-raised as
:class:`TemplateError`.

Hierarchy
---------
SshConfigAddError
├── InvalidInputError
└── TemplateError
"""

from __future__ import annotations


class SshConfigAddError(Exception):
    """Base exception for all ssh-config-add errors.

    The CLI error boundary renders the message (and optional hint)
    without a stack trace and exits with a general-error code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class InvalidInputError(SshConfigAddError):
    """Raised when a command-line value has the wrong shape."""


# --- Rendering -------------------------------------------------------------

class TemplateError(SshConfigAddError):
    """Raised when the configuration template cannot be loaded or rendered."""

"""Allow ``python -m ssh_config_add`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ssh_config_add`` behaves identically to the
``ssh-config-add`` console script.
"""

from __future__ import annotations

from ssh_config_add.cli.app import cli

if __name__ == "__main__":
    cli()

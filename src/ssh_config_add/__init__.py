"""ssh-config-add — generate SSH client configuration stanzas.

Renders a ``Host`` block from command-line flags, ready to be appended
to an OpenSSH client config file.
"""

from ssh_config_add.version import __version__

__all__: list[str] = ["__version__"]

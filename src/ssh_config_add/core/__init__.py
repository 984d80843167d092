"""Core layer — pure argument resolution and template rendering.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``.
* All functions are deterministic.
"""

from ssh_config_add.core.destination import parse_destination
from ssh_config_add.core.models import ConfigRecord
from ssh_config_add.core.renderer import render_config, render_template
from ssh_config_add.core.resolver import build_config

__all__: list[str] = [
    "ConfigRecord",
    "build_config",
    "parse_destination",
    "render_config",
    "render_template",
]

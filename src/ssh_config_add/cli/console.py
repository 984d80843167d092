"""Rich console for diagnostics.

Diagnostics go to stderr so that stdout carries only the rendered
configuration block.  Soft wrapping keeps user input on one line.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, soft_wrap=True)

"""Shared pytest fixtures and configuration for the ssh-config-add test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests call ``main(argv)`` directly and read output via ``capsys``.
"""

from __future__ import annotations

"""Render a :class:`ConfigRecord` into an SSH ``Host`` block.

Line order and omission rules live entirely in the Jinja2 template
``templates/ssh_config.j2``; this module only loads it and translates
Jinja2 failures into :class:`~ssh_config_add.exceptions.TemplateError`.
"""

from __future__ import annotations

from functools import lru_cache

import jinja2

from ssh_config_add.core.models import ConfigRecord
from ssh_config_add.exceptions import TemplateError

DEFAULT_TEMPLATE: str = "ssh_config.j2"


@lru_cache(maxsize=1)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.PackageLoader("ssh_config_add", "templates"),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=False,
        autoescape=False,
    )


def render_template(record: ConfigRecord, template_name: str) -> str:
    """Render *record* with the named template.

    Raises
    ------
    TemplateError
        If the template is missing, malformed, or references an
        undefined variable.
    """
    try:
        template = _environment().get_template(template_name)
        return template.render(record.as_context())
    except jinja2.TemplateError as exc:
        raise TemplateError(
            f"Failed to render template {template_name!r}: {exc}",
        ) from exc


def render_config(record: ConfigRecord) -> str:
    """Render *record* with the built-in SSH config template."""
    return render_template(record, DEFAULT_TEMPLATE)

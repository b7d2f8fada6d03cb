"""Create the planned project: directories, rendered templates, empty files."""

import os

from blueprint.errors import TemplateNotFoundError
from blueprint.template_renderer import render_template


def _ensure_parent(path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _write_file(path, content):
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def _render(layout_id, entry, data, renderer):
    try:
        return renderer(entry.source, **data)
    except FileNotFoundError as e:
        raise TemplateNotFoundError(layout_id, entry.source, entry.destination) from e


def execute(layout, data, *, renderer=render_template):
    """Write every file of a qualified layout.

    Args:
        layout: Dict of layout id -> LayoutEntry with final destinations.
        data: Template variables.
        renderer: Callable(template_name, **data) -> str.

    Returns:
        List of the destinations written, in layout order.
    """
    written = []
    for layout_id, entry in layout.items():
        if entry.source:
            content = _render(layout_id, entry, data, renderer)
        else:
            content = ""
        _write_file(entry.destination, content)
        written.append(entry.destination)
    return written

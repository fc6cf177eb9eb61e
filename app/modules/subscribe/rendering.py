"""HTML rendering of formatter render arrays."""

from html import escape
from typing import Any, Dict, List


def _attributes(attributes: Dict[str, Any]) -> str:
    parts: List[str] = []
    for name, value in attributes.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        parts.append(f'{name}="{escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def render_element(element: Dict[str, Any]) -> str:
    """Render one element of a formatter render array.

    Raises:
        ValueError: If the element type is not "html_tag" or "link".
    """
    element_type = element.get("type")
    attributes = _attributes(element.get("attributes", {}))
    if element_type == "html_tag":
        tag = element["tag"]
        return f"<{tag}{attributes}>{escape(element['value'])}</{tag}>"
    if element_type == "link":
        href = escape(element["url"], quote=True)
        return f'<a href="{href}"{attributes}>{escape(element["title"])}</a>'
    raise ValueError(f"Unsupported render element type: {element_type}")


def render_html(build: Dict[str, Any]) -> str:
    """Render every item of a render array; empty arrays render to ""."""
    return "".join(render_element(item) for item in build.get("items", []))

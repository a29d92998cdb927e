"""Schema tree rendering for diagnostics."""

from __future__ import annotations

from .schema_description import FieldDescription, FieldType

_BRANCH = "├─ "
_LAST_BRANCH = "└─ "
_PIPE = "│  "
_BLANK = "   "


def render_schema(schema: FieldDescription) -> str:
    """Render a schema as an indented tree, one node per line."""
    lines = [_describe_node(schema, name=None)]
    _render_children(schema, prefix="", lines=lines)
    return "\n".join(lines)


def _render_children(schema: FieldDescription, *, prefix: str, lines: list[str]) -> None:
    nodes: list[tuple[str | None, FieldDescription]]
    if schema.type is FieldType.ARRAY:
        assert schema.element is not None
        nodes = [(None, schema.element)]
    elif schema.type is FieldType.OBJECT:
        nodes = list(schema.children.items())
    else:
        return

    for position, (name, child) in enumerate(nodes):
        is_last = position == len(nodes) - 1
        connector = _LAST_BRANCH if is_last else _BRANCH
        lines.append(f"{prefix}{connector}{_describe_node(child, name=name)}")
        _render_children(child, prefix=prefix + (_BLANK if is_last else _PIPE), lines=lines)


def _describe_node(schema: FieldDescription, *, name: str | None) -> str:
    text = f"{name}: " if name else ""
    text += f"<{schema.type.value}>"
    if schema.description:
        text += f" - {schema.description}"
    if schema.has_fallback:
        text += f" [Fallback: '{_format_fallback(schema.fallback)}']"
    return text


def _format_fallback(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

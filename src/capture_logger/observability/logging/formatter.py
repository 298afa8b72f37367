"""Observability – ``{}`` placeholder formatter for captured messages."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

PLACEHOLDER = "{}"
_ESCAPE = "\\"


def render_arg(arg: Any) -> str:
    """Stringify one argument the way formatted messages show it."""
    if arg is None:
        return "null"
    if isinstance(arg, (list, tuple)):
        return "[" + ", ".join(render_arg(a) for a in arg) + "]"
    try:
        return str(arg)
    except Exception as exc:  # noqa: BLE001
        return f"[FAILED str(); {type(exc).__name__}: {exc}]"


def format_message(template: str | None, args: Sequence[Any] | None) -> str | None:
    """Substitute ``{}`` placeholders in *template* with *args* in order.

    Excess arguments are ignored and unmatched placeholders stay literal.
    ``\\{}`` is an escaped placeholder rendered as ``{}``; ``\\\\{}`` renders a
    single backslash followed by the argument.
    """
    if template is None:
        return None
    if not args:
        return template

    out: list[str] = []
    pos = 0
    index = 0
    while index < len(args):
        found = template.find(PLACEHOLDER, pos)
        if found == -1:
            break
        escaped = found >= 1 and template[found - 1] == _ESCAPE
        double_escaped = escaped and found >= 2 and template[found - 2] == _ESCAPE
        if escaped and not double_escaped:
            out.append(template[pos : found - 1])
            out.append(PLACEHOLDER)
            pos = found + len(PLACEHOLDER)
            continue
        if double_escaped:
            out.append(template[pos : found - 1])
        else:
            out.append(template[pos:found])
        out.append(render_arg(args[index]))
        index += 1
        pos = found + len(PLACEHOLDER)
    out.append(template[pos:])
    return "".join(out)


__all__ = ["PLACEHOLDER", "format_message", "render_arg"]

"""Convert HTML fragments and JSON documents into plain Markdown."""

from __future__ import annotations

import json
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

_SELECTOR = "h1, h2, h3, h4, h5, h6, p, a, div"

_HEADING_PREFIXES = {f"h{level}": "#" * level for level in range(1, 7)}

_I64_MIN = -(2**63)
_U64_MAX = 2**64 - 1


def _element_text(element: Tag) -> str:
    """Join every text node below ``element`` with spaces and trim the result."""
    pieces = (
        str(node)
        for node in element.descendants
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
    )
    return " ".join(pieces).strip()


def _render_element(element: Tag, text: str) -> str:
    prefix = _HEADING_PREFIXES.get(element.name)
    if prefix is not None:
        return f"{prefix} {text}\n\n"
    if element.name == "a":
        href = element.get("href")
        if href is not None:
            return f"[{text}]({href})\n\n"
    return f"{text}\n\n"


def html_to_markdown(html: str) -> str:
    """Render headings, paragraphs, links and divs of an HTML fragment as Markdown.

    Every matching element is emitted in document order, nested ones included;
    elements without text are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    parts = []
    for element in soup.select(_SELECTOR):
        text = _element_text(element)
        if text:
            parts.append(_render_element(element, text))
    return "".join(parts).strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported JSON constant: {name}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if value in (float("inf"), float("-inf")):
        raise ValueError(f"number out of range: {literal}")
    return value


def _parse_int(literal: str) -> int | float:
    value = int(literal)
    if _I64_MIN <= value <= _U64_MAX:
        return value
    try:
        return _parse_float(literal)
    except OverflowError as exc:
        raise ValueError(f"number out of range: {literal}") from exc


def _format_float(number: float) -> str:
    text = repr(number)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    sign = "-" if exponent.startswith("-") else ""
    digits = exponent.lstrip("+-").lstrip("0") or "0"
    return f"{mantissa}e{sign}{digits}"


def json_to_markdown(text: str) -> str:
    """Parse ``text`` as JSON and render it as Markdown; invalid input renders as ``null``."""
    try:
        value = json.loads(
            text,
            parse_float=_parse_float,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError):
        value = None
    return json_value_to_markdown(value)


def json_value_to_markdown(value: Any) -> str:
    """Render an already decoded JSON value as Markdown.

    Objects become ``###`` sections in key order, arrays become list items.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, dict):
        return "".join(
            f"### {key}\n\n{json_value_to_markdown(value[key])}\n\n" for key in sorted(value)
        )
    if isinstance(value, (list, tuple)):
        return "\n".join(f"1. {json_value_to_markdown(item)}\n" for item in value)
    raise TypeError(f"not a JSON value: {type(value).__name__}")
"""Fetch a page and render it as Markdown, with lists, code, quotes, images and tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

import requests
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from agentkit.fetch import FetchError
from agentkit.markdown import json_to_markdown

_SELECTOR = (
    "h1, h2, h3, h4, h5, h6, p, a, div, ul, ol, li, pre, code, "
    "blockquote, img, table, tr, th, td"
)

_HEADING_PREFIXES = {f"h{level}": "#" * level for level in range(1, 7)}

# Elements rendered even when they hold no text.
_SPECIAL_ELEMENTS = frozenset({"img", "pre", "table", "tr", "th", "td"})


def _text_nodes(element: Tag) -> Iterator[str]:
    for node in element.descendants:
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            yield str(node)


def _lines(text: str) -> list[str]:
    """Split on newlines like a line iterator: no trailing empty line, ``\\r`` dropped."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _parent_name(element: Tag) -> str | None:
    parent = element.parent
    if isinstance(parent, Tag):
        return parent.name
    return None


def _render_element(element: Tag, text: str) -> str:
    name = element.name
    prefix = _HEADING_PREFIXES.get(name)
    if prefix is not None:
        return f"{prefix} {text}\n\n"
    if name == "p":
        return f"{text}\n\n"
    if name == "a":
        href = element.get("href")
        if href is None:
            return text
        return f"[{text or href}]({href})"
    if name in ("ul", "ol", "table", "tr"):
        return "\n"
    if name == "li":
        marker = "1." if _parent_name(element) == "ol" else "-"
        return f"{marker} {text}\n"
    if name == "pre":
        code = "".join(_text_nodes(element))
        return f"```\n{code}\n```\n\n"
    if name == "code":
        if _parent_name(element) == "pre":
            return ""
        return f"`{text}`"
    if name == "blockquote":
        quoted = "".join(f"> {line}\n" for line in _lines(text) if line.strip())
        return quoted + "\n"
    if name == "img":
        src = element.get("src")
        if src is None:
            return ""
        alt = element.get("alt", "image")
        return f"![{alt}]({src})\n\n"
    if name in ("th", "td"):
        return f"| {text} "
    return f"{text}\n\n"


def html_to_markdown(html: str) -> str:
    """Render an HTML fragment as Markdown, including lists, code, quotes, images and tables."""
    soup = BeautifulSoup(html, "html.parser")
    parts = []
    for element in soup.select(_SELECTOR):
        text = " ".join(_text_nodes(element)).strip()
        if not text and element.name not in _SPECIAL_ELEMENTS:
            continue
        parts.append(_render_element(element, text))
    return process_tables("".join(parts)).strip()


def _is_table_line(line: str) -> bool:
    return "|" in line and (line.strip().startswith("|") or " | " in line)


def _render_table(rows: list[str]) -> str:
    if len(rows) > 1:
        columns = rows[0].count("|")
        rows = [rows[0], ("| --- " * columns).rstrip(), *rows[1:]]
    return "".join(f"{row}\n" for row in rows) + "\n"


def process_tables(markdown: str) -> str:
    """Group consecutive pipe rows into tables and add a header separator row."""
    output = []
    table: list[str] = []
    for line in _lines(markdown):
        if _is_table_line(line):
            table.append(line)
            continue
        if table:
            output.append(_render_table(table))
            table = []
        output.append(f"{line}\n")
    if table:
        output.append(_render_table(table))
    return "".join(output)


def fetch_as_markdown(
    url: str,
    headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
) -> str:
    """GET ``url`` and convert the body to Markdown, as JSON or as HTML by content type.

    Raises :class:`FetchError` when the request fails or the status is not 2xx.
    """
    try:
        response = requests.get(url, headers=dict(headers or {}))
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc
    status = response.status_code
    if not 200 <= status < 300:
        raise FetchError(f"Request failed with status code: {status}")
    content = response.content.decode("utf-8", errors="replace")
    content_type = response.headers.get("content-type", "").lower()
    if "application/json" in content_type:
        return json_to_markdown(content)
    return html_to_markdown(content)
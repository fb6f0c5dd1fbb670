"""Search the Context7 documentation index for libraries by name."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import requests

from agentkit.fetch import FetchError

API_BASE_URL = "https://context7.com/api"

_I64_MAX = 2**63 - 1

RESULTS_HEADER = (
    "Available Libraries (top matches):\n\n"
    "Each result includes information like:\n"
    "- Title: Library or package name\n"
    "- Context7-compatible library ID: Identifier (format: /org/repo)\n"
    "- Description: Short summary\n"
    "- Code Snippets: Number of available code examples (if available)\n"
    "- GitHub Stars: Popularity indicator (if available)\n\n"
    "For best results, select libraries based on name match, popularity (stars), "
    "snippet coverage, and relevance to your use case.\n\n---\n"
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported JSON constant: {name}")


def _text_field(item: Any, key: str) -> str:
    value = item.get(key) if isinstance(item, dict) else None
    return value if isinstance(value, str) else "N/A"


def _count_field(item: Any, key: str) -> int | None:
    value = item.get(key) if isinstance(item, dict) else None
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _I64_MAX:
        return value
    return None


def _describe_result(item: Any) -> str:
    details = [
        f"- Title: {_text_field(item, 'title')}",
        f"- Context7-compatible library ID: {_text_field(item, 'id')}",
        f"- Description: {_text_field(item, 'description')}",
    ]
    snippets = _count_field(item, "totalSnippets")
    if snippets is not None:
        details.append(f"- Code Snippets: {snippets}")
    stars = _count_field(item, "stars")
    if stars is not None:
        details.append(f"- GitHub Stars: {stars}")
    return "\n".join(details)


def format_search_results(body: str, content_type: str | None) -> str:
    """Turn a search response body into a readable list of matching libraries.

    Unexpected responses are described in the returned text rather than raised.
    """
    if content_type is None:
        return f"Missing content type in response. Body: {body}"
    if "application/json" not in content_type:
        return f"Unexpected content type: {content_type}. Body: {body}"
    try:
        document = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return f"Failed to parse API response JSON. Body: {body}"
    if not isinstance(document, dict) or "results" not in document:
        return (
            "API response did not contain a 'results' field as expected. "
            f"Body: {body}"
        )
    results = document["results"]
    if not isinstance(results, list):
        return (
            "API response 'results' field was not an array as expected. "
            f"Body: {body}"
        )
    if not results:
        return "No libraries found matching your query."
    return RESULTS_HEADER + "\n\n".join(_describe_result(item) for item in results)


def resolve_library_id(query: str) -> str:
    """Search Context7 for ``query`` and describe the matching libraries.

    Raises :class:`FetchError` when the request fails or the status is not 2xx.
    """
    url = f"{API_BASE_URL}/v1/search?query={quote(query, safe='')}"
    try:
        response = requests.get(url)
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc
    status = response.status_code
    if not 200 <= status < 300:
        raise FetchError(f"Request failed with status code: {status}")
    body = response.content.decode("utf-8", errors="replace")
    return format_search_results(body, response.headers.get("content-type"))
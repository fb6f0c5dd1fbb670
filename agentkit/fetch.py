"""Fetch a URL over HTTP and return its body as text."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import requests


class FetchError(Exception):
    """Raised when a request cannot be sent or returns a non-success status."""


HeaderSpec = Mapping[str, str] | Iterable[tuple[str, str]] | None


def _header_dict(headers: HeaderSpec) -> dict[str, str]:
    if headers is None:
        return {}
    if isinstance(headers, Mapping):
        return dict(headers)
    return {name: value for name, value in headers}


def fetch(url: str, headers: HeaderSpec = None) -> str:
    """GET ``url`` with the given headers and return the body decoded as UTF-8.

    Invalid byte sequences are replaced. Any status outside 200-299 raises
    :class:`FetchError`, as does a failure to send the request.
    """
    try:
        response = requests.get(url, headers=_header_dict(headers))
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc
    status = response.status_code
    if not 200 <= status < 300:
        raise FetchError(f"Request failed with status code: {status}")
    return response.content.decode("utf-8", errors="replace")
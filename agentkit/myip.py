"""Look up the public IP address of this host."""

from __future__ import annotations

from agentkit.fetch import FetchError, fetch

TRACE_URL = "https://1.1.1.1/cdn-cgi/trace"
_IP_PREFIX = "ip="


def parse_trace(text: str) -> str:
    """Extract the address from the first ``ip=`` line of a trace response.

    Raises :class:`ValueError` when no such line exists.
    """
    for raw_line in text.split("\n"):
        line = raw_line.removesuffix("\r")
        if line.startswith(_IP_PREFIX):
            while line.startswith(_IP_PREFIX):
                line = line[len(_IP_PREFIX):]
            return line
    raise ValueError("Could not find IP address in response")


def get_ip() -> str:
    """Return this host's public IP address; raise :class:`FetchError` on failure."""
    body = fetch(TRACE_URL)
    try:
        return parse_trace(body)
    except ValueError as exc:
        raise FetchError(str(exc)) from exc
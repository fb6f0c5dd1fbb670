import pytest
import requests
import responses

from agentkit.fetch import FetchError, fetch

URL = "https://api.example.com/data"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_returns_body(mocked):
    mocked.add(responses.GET, URL, body="hello world", status=200)
    assert fetch(URL) == "hello world"


def test_sends_header_pairs(mocked):
    mocked.add(responses.GET, URL, body="ok", status=200)
    fetch(URL, [("X-Trace", "abc"), ("Accept", "text/plain")])
    sent = mocked.calls[0].request.headers
    assert sent["X-Trace"] == "abc"
    assert sent["Accept"] == "text/plain"


def test_sends_header_mapping(mocked):
    mocked.add(responses.GET, URL, body="ok", status=200)
    fetch(URL, {"Authorization": "Bearer token"})
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer token"


@pytest.mark.parametrize("status", [404, 500, 503])
def test_error_status_raises(mocked, status):
    mocked.add(responses.GET, URL, body="nope", status=status)
    with pytest.raises(FetchError, match=f"Request failed with status code: {status}"):
        fetch(URL)


def test_other_success_status_accepted(mocked):
    mocked.add(responses.GET, URL, body="created", status=201)
    assert fetch(URL) == "created"


def test_connection_error_raises(mocked):
    mocked.add(responses.GET, URL, body=requests.ConnectionError("boom"))
    with pytest.raises(FetchError, match="boom"):
        fetch(URL)


def test_invalid_utf8_is_replaced(mocked):
    mocked.add(responses.GET, URL, body=b"ab\xffcd", status=200)
    result = fetch(URL)
    assert result.startswith("ab")
    assert result.endswith("cd")
    assert "\ufffd" in result
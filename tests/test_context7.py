import json

import pytest
import responses

from agentkit.context7 import API_BASE_URL, RESULTS_HEADER, format_search_results, resolve_library_id
from agentkit.fetch import FetchError

JSON_TYPE = "application/json"
SEARCH_URL = f"{API_BASE_URL}/v1/search"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_missing_content_type():
    assert format_search_results("hello", None) == "Missing content type in response. Body: hello"


def test_unexpected_content_type():
    assert (
        format_search_results("<p>x</p>", "text/html")
        == "Unexpected content type: text/html. Body: <p>x</p>"
    )


def test_invalid_json():
    assert format_search_results("{", JSON_TYPE) == "Failed to parse API response JSON. Body: {"


def test_nan_is_not_json():
    result = format_search_results('{"results": NaN}', JSON_TYPE)
    assert result.startswith("Failed to parse API response JSON.")


def test_missing_results_field():
    result = format_search_results("{}", JSON_TYPE)
    assert result == "API response did not contain a 'results' field as expected. Body: {}"


def test_results_not_array():
    body = '{"results": null}'
    result = format_search_results(body, JSON_TYPE)
    assert result == f"API response 'results' field was not an array as expected. Body: {body}"


def test_empty_results():
    body = json.dumps({"results": []})
    assert format_search_results(body, JSON_TYPE) == "No libraries found matching your query."


def test_full_result():
    item = {
        "title": "React",
        "id": "/facebook/react",
        "description": "UI library",
        "totalSnippets": 10,
        "stars": 200,
    }
    result = format_search_results(json.dumps({"results": [item]}), "application/json; charset=utf-8")
    assert result.startswith(RESULTS_HEADER)
    assert result[len(RESULTS_HEADER):].split("\n") == [
        "- Title: React",
        "- Context7-compatible library ID: /facebook/react",
        "- Description: UI library",
        "- Code Snippets: 10",
        "- GitHub Stars: 200",
    ]


def test_missing_fields_default_and_counts_filtered():
    items = [{"totalSnippets": -1, "stars": 1.5}, {"title": 3, "stars": True}]
    result = format_search_results(json.dumps({"results": items}), JSON_TYPE)
    entries = result[len(RESULTS_HEADER):].split("\n\n")
    assert len(entries) == 2
    for entry in entries:
        assert entry.split("\n") == [
            "- Title: N/A",
            "- Context7-compatible library ID: N/A",
            "- Description: N/A",
        ]


def test_zero_counts_are_kept():
    items = [{"title": "x", "totalSnippets": 0, "stars": 0}]
    result = format_search_results(json.dumps({"results": items}), JSON_TYPE)
    assert "- Code Snippets: 0" in result
    assert "- GitHub Stars: 0" in result


def test_resolve_encodes_query(mocked):
    mocked.add(responses.GET, SEARCH_URL, json={"results": []})
    assert resolve_library_id("next.js app/router") == "No libraries found matching your query."
    assert mocked.calls[0].request.url.endswith("?query=next.js%20app%2Frouter")


def test_resolve_formats_results(mocked):
    mocked.add(responses.GET, SEARCH_URL, json={"results": [{"title": "Flask"}]})
    result = resolve_library_id("flask")
    assert result.startswith(RESULTS_HEADER)
    assert "- Title: Flask" in result


def test_resolve_error_status(mocked):
    mocked.add(responses.GET, SEARCH_URL, status=500)
    with pytest.raises(FetchError, match="Request failed with status code: 500"):
        resolve_library_id("flask")


def test_resolve_unexpected_content_type(mocked):
    mocked.add(responses.GET, SEARCH_URL, body="oops", content_type="text/plain")
    assert resolve_library_id("flask") == "Unexpected content type: text/plain. Body: oops"
# agentkit

A small collection of self-contained tools that are handy to give to an
agent or to use from scripts:

- `agentkit.markdown`: convert HTML fragments or JSON documents to Markdown.
- `agentkit.fetch_markdown`: fetch a URL and return its content as Markdown,
  with support for lists, code blocks, quotes, images and tables.
- `agentkit.fetch`: fetch a URL and return the body as text.
- `agentkit.context7`: search the Context7 library index and format the matches.
- `agentkit.filesystem`: list directories, read files, search by name and
  show file metadata, with `~` expanded from `$HOME`.
- `agentkit.myip`: look up your public IP address.
- `agentkit.clock`: the current UTC time as an ISO 8601 / RFC 3339 string.

## Installation

```
pip install agentkit
```

## Markdown conversion

```python
from agentkit.markdown import html_to_markdown, json_to_markdown

html_to_markdown("<h1>Title</h1><p>Hello</p>")
# '# Title\n\nHello'

json_to_markdown('{"name": "agentkit"}')
# '### name\n\nagentkit\n\n'
```

`agentkit.markdown.html_to_markdown` handles headings, paragraphs, links and
divs; elements without text are skipped. `json_to_markdown` renders objects as
`###` sections in sorted key order and arrays as `1.` list items; input that is
not valid JSON renders as `null`. `json_value_to_markdown` does the same for a
value that is already decoded.

`agentkit.fetch_markdown.html_to_markdown` also renders lists, code blocks,
inline code, block quotes, images and tables; `process_tables` groups
consecutive pipe rows into a table and adds a `| --- ` separator after the
first row.

## Fetching

```python
from agentkit.fetch import fetch, FetchError
from agentkit.fetch_markdown import fetch_as_markdown

try:
    body = fetch("https://example.com/", [("Accept", "text/html")])
except FetchError as exc:
    print(exc)

print(fetch_as_markdown("https://example.com/", []))
```

Headers may be given as a mapping or as `(name, value)` pairs. Bodies are
decoded as UTF-8 with invalid bytes replaced. A failure to send the request, or
a status outside 200–299, raises `FetchError`. `fetch_as_markdown` converts a
body whose content type contains `application/json` with `json_to_markdown`,
and anything else as HTML.

## Filesystem

```python
from agentkit.filesystem import (
    FilesystemError, get_file_info, list_directory, read_file, search_file,
)

for entry in list_directory("~"):
    print(entry, end="")

print(search_file("~/projects", "readme"))
print(get_file_info("~/notes.txt"))
```

- `list_directory` returns one `[DIR] name` or `[FILE] name` line per entry,
  each ending in a newline.
- `read_file` returns the contents of a UTF-8 text file.
- `search_file` walks a directory recursively and returns, joined by newlines,
  the paths whose name contains the pattern, ignoring case.
- `get_file_info` returns a one-line description of the file's type,
  permissions, size and timestamps.
- `expand_path` replaces a leading `~` with `$HOME`.

Errors are raised as `FilesystemError`.

## Library lookup, public IP and time

```python
from agentkit.context7 import resolve_library_id
from agentkit.myip import get_ip
from agentkit.clock import get_current_time

print(resolve_library_id("requests"))
print(get_ip())
print(get_current_time())
```

`resolve_library_id` raises `FetchError` on a failed request; an unexpected
response body is described in the returned text instead, as produced by
`format_search_results`. `get_ip` reads the `ip=` line of a trace response
(see `parse_trace`) and raises `FetchError` when there is none.

## What it does not do

agentkit is a library of functions only: it installs no command-line program
and runs no server.

## Running the tests

```
pip install -e ".[test]"
pytest
```
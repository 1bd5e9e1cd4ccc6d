# shellextensions

A small client library for the GNOME Shell extensions website. It can
search the extension catalogue, fetch the details of one extension, read its
comments and download its icons and screenshots. It also holds the version
rules that decide whether an extension supports a given GNOME Shell release.

## Installation

```
pip install shellextensions
```

To run the test suite:

```
pip install "shellextensions[test]"
pytest
```

## Searching

```python
from shellextensions.search_provider import SearchProvider, SearchSort

provider = SearchProvider(shell_version="46")
page = provider.query("dash", 1, SearchSort.DOWNLOADS)

print(page.num_pages)
for result in page.results:
    print(result.uuid, result.name, result.downloads)
```

`query` returns a `SearchPage` with a list of `SearchResult` objects in
`results` and the total page count in `num_pages`. The shell version
defaults to `"42"`. With `show_unsupported=True` the search leaves out the
shell version filter and returns extensions for every release.

Results can be sorted by `SearchSort.RELEVANCE` (the default),
`SearchSort.DOWNLOADS`, `SearchSort.RECENT` or `SearchSort.NAME`.
`sort_string` gives the query parameter used for each, and falls back to
relevance for an unknown value.

## Details of one extension

```python
from shellextensions.data_provider import DataProvider

info = DataProvider().get("some-extension@example.com")
print(info.name, info.creator, info.pk)
print(info.supports_shell_version("46"))
```

A `SearchResult` carries `uuid`, `name`, `creator`, `icon`, `screenshot`,
`url`, `donation_urls`, `link`, `description`, `pk`, `downloads` and
`shell_version_map`.

`supports_shell_version` checks the extension's `ShellVersionMap`
(`shellextensions.shell_version_map`). The major versions must match, and
the queried minor version must equal or extend the entry's: `3.38` matches
an entry for `3.38`, and `46.1` matches an entry for `46`. An extension with
no map, or an empty one, supports no version. A map can also be built
directly with `ShellVersionMap.from_json` or filled with `add`.

## Comments

```python
from shellextensions.comment_provider import CommentProvider

for comment in CommentProvider().get_comments(1234, False):
    print(comment.author, comment.rating, comment.date)
    print(comment.comment)
```

Pass `True` as the second argument to retrieve every comment rather than the
first batch. A comment without a rating, or with one outside -1 to 5, has a
`rating` of `-1`.

## Images

```python
from shellextensions.image_resolver import ImageResolver, resolve_url

data = ImageResolver().resolve("/extension-data/icons/icon_1234.png")
```

Relative paths are resolved against the extensions website (`resolve_url`
does this on its own), and the raw image bytes are returned. `resolve(None)`
returns `None` without making a request. Images are returned as bytes; no
decoding is done.

## Errors

Failed requests raise `shellextensions.request_handler.RequestError`. When
the server answered, `status_code` holds the HTTP status. For server errors
(5xx) the message asks you to check the GNOME infrastructure status; for
client errors (4xx) it asks you to check your network. An image request that
returns an empty body also raises `RequestError`.

A response body that is not valid JSON, or not of the expected shape, raises
`ValueError`.

## Shared sessions

Every provider and the image resolver accept an optional
`requests.Session`, so that one connection pool can be shared between them.
Requests time out after 30 seconds.

## Enumerations

`shellextensions.types` defines `ExtensionType` (system or per-user),
`ExtensionState` (active, inactive, error, out of date, and so on) and
`InstallButtonState`.

## What this package does not do

It only talks to the extensions website. It does not list, install,
enable, disable or remove extensions on the local machine, does not talk to
GNOME Shell, and has no command-line tool or graphical interface.
import json

import pytest
import responses

from shellextensions.comment import Comment
from shellextensions.comment_provider import CommentProvider
from shellextensions.request_handler import RequestError

PAYLOAD = [
    {
        "is_extension_creator": False,
        "comment": "Nice",
        "author": {"username": "bob"},
        "rating": 5,
        "date": {"timestamp": "2022-05-01T10:00:00"},
    },
    {
        "is_extension_creator": True,
        "comment": "Thanks",
        "author": {"username": "carol"},
        "rating": -1,
        "date": {"timestamp": "2022-05-02T10:00:00"},
    },
]


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def test_get_comments_builds_url_and_parses(rsps):
    url = "https://extensions.gnome.org/comments/all/?pk=42&all=false"
    rsps.add(responses.GET, url, json=PAYLOAD)
    comments = CommentProvider().get_comments(42, False)
    assert rsps.calls[0].request.url == url
    assert [c.author for c in comments] == ["bob", "carol"]
    assert comments[1].is_extension_creator is True
    assert comments[0].rating == 5


def test_retrieve_all_flag(rsps):
    url = "https://extensions.gnome.org/comments/all/?pk=7&all=true"
    rsps.add(responses.GET, url, json=[])
    assert CommentProvider().get_comments(7, True) == []
    assert rsps.calls[0].request.url == url


def test_handle_response_round_trip():
    comments = CommentProvider().handle_response(json.dumps(PAYLOAD).encode())
    assert comments == [Comment.from_json(item) for item in PAYLOAD]


def test_handle_response_requires_array():
    with pytest.raises(ValueError):
        CommentProvider().handle_response(b'{"comments": []}')


def test_handle_response_rejects_invalid_json():
    with pytest.raises(ValueError):
        CommentProvider().handle_response(b"[not json")


def test_http_error_is_raised(rsps):
    url = "https://extensions.gnome.org/comments/all/?pk=1&all=false"
    rsps.add(responses.GET, url, status=500)
    with pytest.raises(RequestError) as info:
        CommentProvider().get_comments(1)
    assert info.value.status_code == 500
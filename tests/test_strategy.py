from pageturn.http import Request, Response
from pageturn.strategy import Shape, classify, is_iterable


def response(body, method="GET"):
    request = Request(method=method, url="https://api.box.com/2.0/items") if method else None
    return Response(body=body, request=request)


def test_empty_body():
    assert not is_iterable(response(None))


def test_no_request():
    assert not is_iterable(response({"entries": []}, method=None))


def test_not_collection():
    assert not is_iterable(response({"type": "file", "id": "12345"}))


def test_entries_not_sequence():
    assert not is_iterable(response({"entries": "12345"}))
    assert not is_iterable(response({"entries": {"id": "12345"}}))


def test_method_not_get_or_post():
    assert not is_iterable(response({"entries": [{"type": "file", "id": "12345"}]}, "DELETE"))


def test_event_stream():
    body = {
        "next_stream_position": "123456",
        "chunk_size": 1,
        "entries": [{"type": "event", "event_id": "98765"}],
    }
    assert classify(response(body)) == Shape.EVENT_STREAM
    assert not is_iterable(response(body))


def test_stream_position_without_chunk_size():
    body = {"next_stream_position": "123456", "entries": []}
    assert is_iterable(response(body))


def test_valid_collection():
    assert is_iterable(response({"entries": []}))
    assert is_iterable(response({"entries": []}, "POST"))


def test_lowercase_method():
    assert is_iterable(response({"entries": []}, "post"))


def test_offset():
    body = {"entries": [{}], "total_count": 100, "limit": 1, "offset": 0}
    assert classify(response(body)) == Shape.OFFSET


def test_offset_without_total_count():
    assert classify(response({"entries": [{}], "limit": 1, "offset": 0})) == Shape.OFFSET


def test_offset_not_integer():
    body = {"entries": [{}], "limit": 1, "offset": "0"}
    assert classify(response(body)) == Shape.UNKNOWN


def test_marker():
    assert classify(response({"entries": [{}], "limit": 1, "next_marker": "vwxyz"})) == Shape.MARKER


def test_empty_marker():
    assert classify(response({"entries": [{}], "limit": 1, "next_marker": ""})) == Shape.MARKER
    assert classify(response({"entries": [{}], "limit": 1, "next_marker": None})) == Shape.MARKER


def test_unknown():
    assert classify(response({"entries": [{}], "limit": 1})) == Shape.UNKNOWN

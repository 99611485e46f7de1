from pageturn.http import Request, RequestOptions, Response


def test_query_from_url():
    request = Request(url="https://api.box.com/2.0/items?marker=abcdef&limit=1")
    assert request.method == "GET"
    assert request.query["marker"] == "abcdef"
    assert request.query["limit"] == "1"
    assert request.base_url == "https://api.box.com/2.0/items"


def test_explicit_query():
    request = Request(url="https://api.box.com/2.0/items?limit=1", query={"limit": 5})
    assert request.query["limit"] == 5


def test_repeated_query_parameters():
    request = Request(url="https://api.box.com/2.0/items?id=1&id=2")
    assert request.query.getall("id") == ["1", "2"]


def test_base_url_drops_fragment():
    request = Request(url="https://api.box.com/2.0/items?limit=1#top")
    assert request.base_url == "https://api.box.com/2.0/items"


def test_method_upper_case():
    assert Request(method="post", url="https://api.box.com/2.0/items").method == "POST"


def test_headers_case_insensitive():
    request = Request(url="https://api.box.com/2.0/items", headers={"As-User": "7"})
    assert request.headers["as-user"] == "7"


def test_body_copied():
    body = {"limit": 1, "fields": ["name"]}
    request = Request(method="POST", url="https://api.box.com/2.0/items", body=body)
    body["fields"].append("size")
    assert request.body == {"limit": 1, "fields": ["name"]}


def test_response_defaults():
    response = Response()
    assert response.status == 200
    assert response.body is None
    assert response.request is None
    assert len(response.headers) == 0


def test_request_options_defaults():
    options = RequestOptions()
    assert len(options.headers) == 0
    assert len(options.query) == 0
    assert options.body is None

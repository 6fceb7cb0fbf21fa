import json
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlparse

import pytest

from netforge import Method, Request, SerializationError


def test_request_fields_round_trip():
    headers = {"Accept": "text/plain", "X-Trace": "abc"}
    params = {"q": "swift", "limit": "10"}
    req = Request("https://api.example.com/data", Method.PUT, headers=headers, query_params=params, body=b"raw")
    assert req.url == "https://api.example.com/data"
    assert req.method is Method.PUT
    assert req.headers == headers
    assert req.query_params == params
    assert req.body == b"raw"


def test_request_defaults():
    req = Request("https://api.example.com/data", "get")
    assert req.method is Method.GET
    assert req.headers == {}
    assert req.query_params == {}
    assert req.body is None


def test_request_copies_mappings():
    headers = {"Accept": "text/plain"}
    req = Request("https://api.example.com", "GET", headers=headers)
    headers["Accept"] = "changed"
    assert req.headers == {"Accept": "text/plain"}


def test_url_and_method_are_read_only():
    req = Request("https://api.example.com", "GET")
    with pytest.raises(AttributeError):
        req.url = "https://other.example.com"
    with pytest.raises(AttributeError):
        req.method = Method.POST
    req.headers["X-Added"] = "1"
    req.query_params["page"] = "2"
    req.body = b"later"
    assert req.headers == {"X-Added": "1"}
    assert req.query_params == {"page": "2"}
    assert req.body == b"later"


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        Request("https://api.example.com", "TRACE")


def test_prepared_url_with_query_params():
    req = Request("https://api.example.com/search", "GET", query_params={"q": "swift", "limit": "10"})
    assert req.prepared_url() == "https://api.example.com/search?q=swift&limit=10"


def test_prepared_url_percent_encodes_each_pair_once():
    params = {"q": "hello world", "tag": "a&b=c", "path": "x/y"}
    req = Request("https://api.example.com/search", "GET", query_params=params)
    query = urlparse(req.prepared_url()).query
    assert "q=hello%20world" in query
    assert "tag=a%26b%3Dc" in query
    assert "path=x%2Fy" in query
    assert sorted(parse_qsl(query)) == sorted(params.items())


def test_prepared_url_merges_existing_query():
    req = Request("https://api.example.com/search?q=old&page=1", "GET", query_params={"q": "new"})
    pairs = parse_qsl(urlparse(req.prepared_url()).query)
    assert sorted(pairs) == [("page", "1"), ("q", "new")]


def test_prepared_url_without_params_is_unchanged():
    req = Request("https://api.example.com/search?q=kept", "GET")
    assert req.prepared_url() == "https://api.example.com/search?q=kept"


@dataclass
class User:
    name: str
    age: int


def test_json_request_sets_body_and_content_type():
    req = Request.json("https://api.example.com/users", "POST", User(name="John", age=30))
    assert req.method is Method.POST
    assert json.loads(req.body) == {"name": "John", "age": 30}
    assert req.headers["Content-Type"] == "application/json"


def test_json_request_overwrites_content_type_any_case():
    req = Request.json(
        "https://api.example.com/users",
        Method.POST,
        {"k": "v"},
        headers={"content-type": "text/plain", "Accept": "application/json"},
        query_params={"dry_run": "1"},
    )
    assert req.headers == {"Accept": "application/json", "Content-Type": "application/json"}
    assert req.query_params == {"dry_run": "1"}


def test_json_request_unserializable_payload():
    with pytest.raises(SerializationError):
        Request.json("https://api.example.com/users", "POST", {"when": object()})


def test_method_values_are_uppercase_verbs():
    assert [m.value for m in Method] == ["GET", "POST", "PUT", "DELETE", "PATCH"]
    assert Method.coerce("patch") is Method.PATCH
    assert str(Method.DELETE) == "DELETE"


def test_prepared_url_keeps_repeated_base_keys():
    req = Request("https://api.example.com/s?tag=a&tag=b", "GET", query_params={"q": "x"})
    assert req.prepared_url() == "https://api.example.com/s?tag=a&tag=b&q=x"


def test_prepared_url_keeps_base_pairs_verbatim():
    req = Request("https://api.example.com/s?flag&name=a+b&drop=1&drop=2", "GET", query_params={"drop": "3"})
    assert req.prepared_url() == "https://api.example.com/s?flag&name=a+b&drop=3"

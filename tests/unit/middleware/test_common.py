"""Unit tests for request-side middleware"""
import json as jsonlib

import pytest

from fetchware import (
    InvalidBodyError,
    MiddlewareOrderError,
    RequestOptions,
    accept,
    auth,
    base,
    body,
    compose,
    header,
    json,
    method,
    params,
    query,
)
from fetchware.middleware import BodyMiddleware, HeaderMiddleware
from tests.fixtures.transport import FakeTransport


@pytest.mark.unit
@pytest.mark.middleware
class TestMethodAndHeaders:

    @pytest.mark.asyncio
    async def test_method_sets_verb(self):
        transport = FakeTransport()

        await compose(transport, method("PATCH"))("/foo")

        assert transport.last_call.options.method == "PATCH"

    @pytest.mark.asyncio
    async def test_header_creates_header_mapping(self):
        transport = FakeTransport()

        await compose(transport, header("X-Trace", "abc"))("/foo")

        assert transport.last_call.options.headers == {"X-Trace": "abc"}

    @pytest.mark.asyncio
    async def test_header_keeps_existing_headers(self, dummy_headers):
        transport = FakeTransport()
        options = RequestOptions(headers=dict(dummy_headers))

        await compose(transport, header("X-Trace", "abc"))("/foo", options)

        assert transport.last_call.options.headers == {**dummy_headers, "X-Trace": "abc"}

    @pytest.mark.asyncio
    async def test_last_header_write_wins(self):
        """
        GIVEN header('X', 'v') followed by header('X', 'w')
        WHEN the request is sent
        THEN the transport should see X: w
        """
        transport = FakeTransport()

        await compose(transport, header("X", "v"), header("X", "w"))("/foo")

        assert transport.last_call.options.headers == {"X": "w"}

    @pytest.mark.asyncio
    async def test_header_names_are_case_sensitive(self):
        transport = FakeTransport()

        await compose(transport, header("x-id", "1"), header("X-Id", "2"))("/foo")

        assert transport.last_call.options.headers == {"x-id": "1", "X-Id": "2"}

    @pytest.mark.asyncio
    async def test_auth_sets_authorization_header(self):
        transport = FakeTransport()

        await compose(transport, auth("Bearer token"))("/foo")

        assert transport.last_call.options.headers["Authorization"] == "Bearer token"

    @pytest.mark.asyncio
    async def test_accept_sets_accept_header(self):
        transport = FakeTransport()

        await compose(transport, accept("application/json"))("/foo")

        assert transport.last_call.options.headers["Accept"] == "application/json"

    def test_auth_and_accept_are_header_middleware(self):
        assert isinstance(auth("x"), HeaderMiddleware)
        assert accept("text/html").name == "Accept"


@pytest.mark.unit
@pytest.mark.middleware
class TestUrlMiddleware:

    @pytest.mark.asyncio
    async def test_base_prepends_without_normalizing(self):
        """
        GIVEN a base URL with a trailing slash
        WHEN a path with a leading slash is requested
        THEN both slashes should be kept
        """
        transport = FakeTransport()

        await compose(transport, base("https://api.example.com/"))("/users")

        assert transport.last_call.url == "https://api.example.com//users"

    @pytest.mark.asyncio
    async def test_query_starts_query_string(self):
        transport = FakeTransport()

        await compose(transport, query({"a": 1}))("/foo")

        assert transport.last_call.url == "/foo?a=1"

    @pytest.mark.asyncio
    async def test_query_appends_to_existing_query_string(self):
        transport = FakeTransport()

        await compose(transport, query({"a": 1}), query({"b": 2}))("/foo")

        assert transport.last_call.url == "/foo?a=1&b=2"

    @pytest.mark.asyncio
    async def test_query_accepts_preformatted_string(self):
        transport = FakeTransport()

        await compose(transport, query("x=1&y=2"))("/foo?z=0")

        assert transport.last_call.url == "/foo?z=0&x=1&y=2"

    @pytest.mark.asyncio
    async def test_base_runs_before_query_in_list_order(self):
        transport = FakeTransport()

        await compose(transport, base("https://h"), query({"q": "a b"}))("/s")

        assert transport.last_call.url == "https://h/s?q=a%20b"


@pytest.mark.unit
@pytest.mark.middleware
class TestBodyMiddleware:

    @pytest.mark.asyncio
    async def test_body_sets_content_and_headers(self):
        """
        GIVEN body('hello', 'text/plain')
        WHEN the request is sent
        THEN Content-Length should be 5 and Content-Type text/plain
        """
        transport = FakeTransport()

        await compose(transport, body("hello", "text/plain"))("/foo")

        options = transport.last_call.options
        assert options.body == "hello"
        assert options.headers["Content-Type"] == "text/plain"
        assert options.headers["Content-Length"] == "5"

    def test_body_rejects_non_string_content_at_construction(self):
        """
        GIVEN non-string content
        WHEN body() is constructed
        THEN it should fail immediately, before any request is made
        """
        with pytest.raises(InvalidBodyError, match="must be a string"):
            body(b"bytes", "application/octet-stream")

    def test_invalid_body_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            BodyMiddleware({"a": 1}, "application/json")

    @pytest.mark.asyncio
    async def test_content_length_counts_characters(self):
        transport = FakeTransport()

        await compose(transport, body("héllo", "text/plain"))("/foo")

        assert transport.last_call.options.headers["Content-Length"] == "5"

    @pytest.mark.asyncio
    async def test_json_serializes_objects(self):
        transport = FakeTransport()

        await compose(transport, json({"a": [1, 2]}))("/foo")

        options = transport.last_call.options
        assert jsonlib.loads(options.body) == {"a": [1, 2]}
        assert options.headers["Content-Type"] == "application/json"
        assert options.headers["Content-Length"] == str(len(options.body))

    @pytest.mark.asyncio
    async def test_json_passes_strings_through(self):
        transport = FakeTransport()

        await compose(transport, json('{"raw": true}'))("/foo")

        assert transport.last_call.options.body == '{"raw": true}'

    @pytest.mark.asyncio
    async def test_json_uses_compact_separators(self):
        transport = FakeTransport()

        await compose(transport, json({"a": [1, 2], "b": "x"}))("/foo")

        options = transport.last_call.options
        assert options.body == '{"a":[1,2],"b":"x"}'
        assert options.headers["Content-Length"] == "19"


@pytest.mark.unit
@pytest.mark.middleware
class TestParamsMiddleware:
    """params() branches on the method set earlier in the chain"""

    @pytest.mark.asyncio
    async def test_params_defaults_to_query_for_get(self):
        """
        GIVEN params({'x': 1}) with no preceding method()
        WHEN the request is sent
        THEN the URL should carry the query and no body should be set
        """
        transport = FakeTransport()

        await compose(transport, params({"x": 1}))("/foo")

        assert transport.last_call.url == "/foo?x=1"
        assert transport.last_call.options.body is None

    @pytest.mark.asyncio
    async def test_params_after_post_become_form_body(self):
        """
        GIVEN method('POST') followed by params({'x': 1})
        WHEN the request is sent
        THEN the URL should be untouched and the body form encoded
        """
        transport = FakeTransport()

        await compose(transport, method("POST"), params({"x": 1}))("/foo")

        options = transport.last_call.options
        assert transport.last_call.url == "/foo"
        assert options.body == "x=1"
        assert options.headers["Content-Type"] == "x-www-form-urlencoded"
        assert options.headers["Content-Length"] == "3"

    @pytest.mark.asyncio
    async def test_params_before_method_ignores_later_method(self):
        """
        GIVEN params() placed before method('POST')
        WHEN the request is sent
        THEN params should still see no method and fall back to the query string
        """
        transport = FakeTransport()

        await compose(transport, params({"x": 1}), method("POST"))("/foo")

        assert transport.last_call.url == "/foo?x=1"
        assert transport.last_call.options.method == "POST"
        assert transport.last_call.options.body is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("verb", ["head", "HEAD", "get"])
    async def test_method_comparison_is_case_insensitive(self, verb):
        transport = FakeTransport()

        await compose(transport, method(verb), params({"x": 1}))("/foo")

        assert transport.last_call.url == "/foo?x=1"

    @pytest.mark.asyncio
    async def test_strict_params_reject_missing_method(self):
        transport = FakeTransport()

        with pytest.raises(MiddlewareOrderError):
            await compose(transport, params({"x": 1}, strict=True))("/foo")

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_strict_params_accept_declared_method(self):
        transport = FakeTransport()

        await compose(transport, method("PUT"), params("x=1", strict=True))("/foo")

        assert transport.last_call.options.body == "x=1"

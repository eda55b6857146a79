"""Precise unit tests for the request/response envelopes."""

import pytest

from tanuki.api.core.enums import Method
from tanuki.api.core.exceptions import InvalidEndpointError
from tanuki.api.runtime.rest.client import RestRequest, RestResponse, join_url


class TestJoinUrl:
    """Test API root joining."""

    def test_plain_concatenation(self):
        assert join_url("https://h/api/v4/", "projects/a%2Fb") == "https://h/api/v4/projects/a%2Fb"
        assert join_url("https://h/api/v4", "/user") == "https://h/api/v4/user"

    def test_colon_segment_is_not_a_scheme(self):
        assert join_url("https://h/api/v4/", "name:with:colons") == "https://h/api/v4/name:with:colons"

    def test_absolute_url_rejected(self):
        with pytest.raises(InvalidEndpointError):
            join_url("https://h/api/v4/", "https://elsewhere/user")


class TestEnvelopes:
    """Test RestRequest and RestResponse."""

    def test_with_headers_copies(self):
        request = RestRequest(method=Method.GET, url="https://h/", headers={"A": "1"})
        updated = request.with_headers({"B": "2", "A": "3"})
        assert updated.headers == {"A": "3", "B": "2"}
        assert request.headers == {"A": "1"}

    def test_response_headers_case_insensitive(self):
        response = RestResponse(status=200, headers={"X-Next-Page": "2"})
        assert response.header("x-next-page") == "2"
        assert response.header("X-NEXT-PAGE") == "2"
        assert response.header("Link") is None

    @pytest.mark.parametrize(("status", "success"), [(199, False), (200, True), (204, True), (302, False)])
    def test_is_success(self, status, success):
        assert RestResponse(status=status).is_success is success

    def test_json(self):
        assert RestResponse(status=200, body=b'{"id": 1}').json() == {"id": 1}
        with pytest.raises(ValueError):
            RestResponse(status=200, body=b"").json()

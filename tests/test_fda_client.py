import pytest
import requests

from conftest import FDA_PAYLOAD
from pill_identifier.errors import RegulatoryLookupError
from pill_identifier.sources.fda_client import FdaLabelClient, build_search_query


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.error:
            raise self.error
        return self.response


def make_client(session):
    return FdaLabelClient(session=session, base_url="https://fda.test/label.json", timeout=3)


def test_query_matches_brand_or_generic_name():
    assert build_search_query(' Tylenol "PM" ') == (
        'openfda.brand_name:"Tylenol PM" OR openfda.generic_name:"Tylenol PM"'
    )


def test_lookup_returns_record():
    session = FakeSession(FakeResponse(200, FDA_PAYLOAD))
    result = make_client(session).lookup("Tylenol")
    assert result.first().openfda.brand_name == ["Tylenol Extra Strength"]
    url, params, timeout = session.requests[0]
    assert url == "https://fda.test/label.json"
    assert params["limit"] == 1
    assert timeout == 3


def test_not_found_is_not_an_error():
    assert make_client(FakeSession(FakeResponse(404))).lookup("Dolo 650") is None


def test_empty_results_is_not_found():
    assert make_client(FakeSession(FakeResponse(200, {"results": []}))).lookup("x") is None


def test_server_error_raises():
    with pytest.raises(RegulatoryLookupError):
        make_client(FakeSession(FakeResponse(500))).lookup("x")


def test_transport_error_raises():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(RegulatoryLookupError):
        make_client(session).lookup("x")


def test_unreadable_payload_raises():
    with pytest.raises(RegulatoryLookupError):
        make_client(FakeSession(FakeResponse(200, None))).lookup("x")

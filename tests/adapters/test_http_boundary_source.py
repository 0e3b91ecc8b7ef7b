"""Tests for the HTTP boundary source."""

from unittest.mock import MagicMock

import pytest
import requests

from footprint.adapters.boundary import HttpBoundarySource
from footprint.config import BoundaryConfig
from footprint.domain.errors import BoundaryFetchError

URL = "https://example.test/china.json"

GEOJSON = {
    "type": "FeatureCollection",
    "features": [
        {"type": "Feature", "properties": {"name": "北京市"}, "geometry": None},
        {"type": "Feature", "properties": {"name": "广东省"}, "geometry": None},
    ],
}


def make_response(status=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def source(session):
    return HttpBoundarySource(BoundaryConfig(url=URL, timeout_seconds=2.5), session=session)


def test_fetch_parses_feature_collection(source, session):
    session.get.return_value = make_response(payload=GEOJSON)

    dataset = source.fetch()

    session.get.assert_called_once_with(URL, timeout=2.5)
    assert dataset.feature_names() == ["北京市", "广东省"]
    assert dataset.source_url == URL


def test_source_id_is_url(source):
    assert source.source_id == URL


def test_http_error_status_raises(source, session):
    session.get.return_value = make_response(status=503)

    with pytest.raises(BoundaryFetchError) as exc_info:
        source.fetch()

    assert exc_info.value.status_code == 503
    assert exc_info.value.url == URL


def test_network_error_raises(source, session):
    session.get.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(BoundaryFetchError) as exc_info:
        source.fetch()

    assert isinstance(exc_info.value.cause, requests.ConnectionError)


def test_invalid_json_raises(source, session):
    session.get.return_value = make_response(json_error=ValueError("bad json"))

    with pytest.raises(BoundaryFetchError):
        source.fetch()


def test_wrong_document_shape_raises(source, session):
    session.get.return_value = make_response(payload={"type": "Feature"})

    with pytest.raises(BoundaryFetchError):
        source.fetch()


def test_default_session_carries_user_agent():
    source = HttpBoundarySource(BoundaryConfig(url=URL, user_agent="ua-test"))
    assert source._get_session().headers["User-Agent"] == "ua-test"


def test_non_object_feature_raises(source, session):
    session.get.return_value = make_response(
        payload={"type": "FeatureCollection", "features": [1]}
    )

    with pytest.raises(BoundaryFetchError):
        source.fetch()

"""Pytest shared fixtures for the PAM SCIM client."""
import pathlib
import sys

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import responses

from pamscim import PamScimService

HOST = "example.my.idaptive.app"
API_URL = f"https://{HOST}/scim/v2"
ACCESS_TOKEN = "test-access-token"


@pytest.fixture
def mocked_responses():
    """Intercept every requests call; unexpected requests fail with ConnectionError."""
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def scim():
    return PamScimService(HOST, token=ACCESS_TOKEN)


@pytest.fixture
def api_url():
    return API_URL


def list_body(*resources):
    return {
        "schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"],
        "totalResults": len(resources),
        "itemsPerPage": len(resources),
        "startIndex": 1,
        "Resources": list(resources),
    }


@pytest.fixture
def make_list():
    return list_body

import json

import pytest
import responses

from pamscim import DecodeError, NotFoundError, ScimValidationError
from pamscim.models import (
    PATCH_OP_SCHEMA,
    PRIVILEGED_DATA_SCHEMA,
    CyberArkPrivilegedData,
    PatchOperation,
    PrivilegedData,
    Property,
)

OPERATOR_PW = {
    "schemas": [PRIVILEGED_DATA_SCHEMA],
    "id": "22_3",
    "name": "Operator-PW",
    "type": "password",
    "urn:ietf:params:scim:schemas:cyberark:1.0:PrivilegedData": {
        "safe": "VaultInternal",
        "properties": [{"key": "Address", "value": "vault.example.com"}],
    },
}


def test_get_privileged_data(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData", json=make_list(OPERATOR_PW), status=200)

    data = scim.privileged_data.get_privileged_data()

    assert data.Resources[0].cyberarkPrivilegedData.properties[0].value == "vault.example.com"


def test_get_privileged_data_index_and_sort(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData", json=make_list(), status=200)
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData", json=make_list(), status=200)

    scim.privileged_data.get_privileged_data_index(1, 100)
    scim.privileged_data.get_privileged_data_sort("type", "ascending")

    assert mocked_responses.calls[0].request.url == f"{api_url}/PrivilegedData?startIndex=1&count=100"
    assert mocked_responses.calls[1].request.url == f"{api_url}/PrivilegedData?sortBy=type&sortOrder=ascending"


def test_get_privileged_data_sort_rejects_display_name(scim, mocked_responses):
    with pytest.raises(ScimValidationError):
        scim.privileged_data.get_privileged_data_sort("displayName")


def test_get_privileged_data_by_id(scim, api_url, mocked_responses):
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData/22_3", json=OPERATOR_PW, status=200)

    assert scim.privileged_data.get_privileged_data_by_id("22_3") == PrivilegedData.model_validate(OPERATOR_PW)


def test_get_privileged_data_by_id_bad_body(scim, api_url, mocked_responses):
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData/22_3", body="oops", status=200)

    with pytest.raises(DecodeError) as exc_info:
        scim.privileged_data.get_privileged_data_by_id("22_3")

    assert str(exc_info.value).startswith("failed to get privileged data 22_3: could not parse response body")


def test_get_privileged_data_by_filter(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/PrivilegedData", json=make_list(OPERATOR_PW), status=200)

    scim.privileged_data.get_privileged_data_by_filter("type", "password")

    assert mocked_responses.calls[0].request.url == f"{api_url}/PrivilegedData?filter=type%20eq%20password"


def test_add_privileged_data(scim, api_url, mocked_responses):
    mocked_responses.add(responses.POST, f"{api_url}/PrivilegedData", json=OPERATOR_PW, status=201)
    data = PrivilegedData(
        schemas=[PRIVILEGED_DATA_SCHEMA],
        name="Operator-PW",
        type="password",
        cyberarkPrivilegedData=CyberArkPrivilegedData(
            safe="VaultInternal",
            password="s3cret",
            properties=[Property(key="Address", value="vault.example.com")],
        ),
    )

    created = scim.privileged_data.add_privileged_data(data)

    sent = json.loads(mocked_responses.calls[0].request.body)
    assert sent["urn:ietf:params:scim:schemas:cyberark:1.0:PrivilegedData"]["safe"] == "VaultInternal"
    assert created.id == "22_3"


def test_update_privileged_data(scim, api_url, mocked_responses):
    mocked_responses.add(responses.PUT, f"{api_url}/PrivilegedData/22_3", json=OPERATOR_PW, status=200)

    scim.privileged_data.update_privileged_data(PrivilegedData.model_validate(OPERATOR_PW))

    assert mocked_responses.calls[0].request.method == "PUT"


def test_update_privileged_data_requires_id(scim):
    with pytest.raises(ScimValidationError):
        scim.privileged_data.update_privileged_data(PrivilegedData(name="Operator-PW"))


def test_modify_privileged_data_sends_patch_request(scim, api_url, mocked_responses):
    mocked_responses.add(responses.PATCH, f"{api_url}/PrivilegedData/22_3", json=OPERATOR_PW, status=200)

    modified = scim.privileged_data.modify_privileged_data(
        "22_3",
        [
            PatchOperation(op="replace", path="description", value="rotated"),
            {"op": "add", "path": "name", "value": "Operator-PW"},
        ],
    )

    sent = json.loads(mocked_responses.calls[0].request.body)
    assert sent == {
        "schemas": [PATCH_OP_SCHEMA],
        "Operations": [
            {"op": "replace", "path": "description", "value": "rotated"},
            {"op": "add", "path": "name", "value": "Operator-PW"},
        ],
    }
    assert modified.name == "Operator-PW"


def test_modify_privileged_data_not_found(scim, api_url, mocked_responses):
    mocked_responses.add(responses.PATCH, f"{api_url}/PrivilegedData/missing", status=404)

    with pytest.raises(NotFoundError) as exc_info:
        scim.privileged_data.modify_privileged_data("missing", [{"op": "remove", "path": "description"}])

    assert exc_info.value.context == ["failed to modify privileged data missing"]


def test_delete_privileged_data(scim, api_url, mocked_responses):
    mocked_responses.add(responses.DELETE, f"{api_url}/PrivilegedData/22_3", status=204)

    assert scim.privileged_data.delete_privileged_data("22_3") is None

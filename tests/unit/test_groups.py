import pytest
import responses

from pamscim import AccessDeniedError, ScimValidationError
from pamscim.models import GROUP_SCHEMA, Group

AUDITORS = {
    "schemas": [GROUP_SCHEMA],
    "id": "5",
    "displayName": "Auditors",
    "members": [{"value": "8", "display": "alice@example.com", "type": "User"}],
}


def test_get_groups(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/Groups", json=make_list(AUDITORS), status=200)

    groups = scim.groups.get_groups()

    assert groups.Resources[0].members[0].display == "alice@example.com"


def test_get_groups_index(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/Groups", json=make_list(), status=200)

    groups = scim.groups.get_groups_index(1, 0)

    assert mocked_responses.calls[0].request.url == f"{api_url}/Groups?startIndex=1&count=0"
    assert groups.Resources == []


def test_get_groups_sort_only_accepts_display_name(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/Groups", json=make_list(AUDITORS), status=200)

    scim.groups.get_groups_sort("displayName")
    with pytest.raises(ScimValidationError):
        scim.groups.get_groups_sort("id")

    assert mocked_responses.calls[0].request.url == f"{api_url}/Groups?sortBy=displayName"
    assert len(mocked_responses.calls) == 1


def test_get_group_by_id(scim, api_url, mocked_responses):
    mocked_responses.add(responses.GET, f"{api_url}/Groups/5", json=AUDITORS, status=200)

    assert scim.groups.get_group_by_id("5") == Group.model_validate(AUDITORS)


def test_get_groups_by_filter_quotes_value(scim, api_url, mocked_responses, make_list):
    mocked_responses.add(responses.GET, f"{api_url}/Groups", json=make_list(AUDITORS), status=200)

    scim.groups.get_groups_by_filter("displayName", "Auditors")

    assert mocked_responses.calls[0].request.url == (
        f"{api_url}/Groups?filter=displayName%20eq%20%22Auditors%22"
    )


def test_get_groups_by_filter_rejects_other_attributes(scim, mocked_responses):
    with pytest.raises(ScimValidationError) as exc_info:
        scim.groups.get_groups_by_filter("members.value", "8")

    assert len(mocked_responses.calls) == 0
    assert "failed to get group based on filter parameters - members.value = 8" in str(exc_info.value)


def test_add_group(scim, api_url, mocked_responses):
    mocked_responses.add(responses.POST, f"{api_url}/Groups", json=AUDITORS, status=201)

    created = scim.groups.add_group(Group(schemas=[GROUP_SCHEMA], displayName="Auditors"))

    assert created.id == "5"


def test_update_group_access_denied(scim, api_url, mocked_responses):
    mocked_responses.add(responses.PUT, f"{api_url}/Groups/5", status=403)

    with pytest.raises(AccessDeniedError) as exc_info:
        scim.groups.update_group(Group.model_validate(AUDITORS))

    assert exc_info.value.context == ["failed to update group 5"]


def test_update_group_requires_id(scim):
    with pytest.raises(ScimValidationError):
        scim.groups.update_group(Group(displayName="Auditors"))


def test_delete_group(scim, api_url, mocked_responses):
    mocked_responses.add(responses.DELETE, f"{api_url}/Groups/5", status=204)

    scim.groups.delete_group("5")

    assert mocked_responses.calls[0].request.method == "DELETE"

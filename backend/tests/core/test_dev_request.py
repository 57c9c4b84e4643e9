"""Dev Request Parsing — ordering and decomposition of /dev query parameters.

Tests:
    - Missing/empty action → ActionRequiredError, even when other params are bad
    - Malformed resource_id is reported before an unrecognized action
    - resource_id decomposes into account/kind/identifier; absent means all None
    - require() names the missing parameter
"""

import pytest

from devgate.core.dev_request import DevRequest, parse_dev_request
from devgate.core.domain_types import DevAction
from devgate.core.errors import (
    ActionNotRecognizedError, ActionRequiredError, CallerError,
    MalformedResourceIdError, MissingParameterError,
)


@pytest.mark.parametrize("query", [{}, {"action": ""}, {"resource_id": "a:b"}])
def test_missing_action_is_caller_error(query):
    with pytest.raises(ActionRequiredError) as exc:
        parse_dev_request(query)
    assert exc.value.http_status == 400
    assert exc.value.message == "action required"


def test_malformed_resource_id_checked_before_action_tag():
    with pytest.raises(MalformedResourceIdError):
        parse_dev_request({"action": "bogus", "resource_id": "only:two"})


def test_unrecognized_action():
    with pytest.raises(ActionNotRecognizedError) as exc:
        parse_dev_request({"action": "bogus"})
    assert exc.value.message == "action not recognized"
    assert exc.value.action == "bogus"


def test_resource_id_decomposed():
    params = parse_dev_request({
        "action": "get_secret", "resource_id": "cucumber:variable:db/password",
    })
    assert params.action is DevAction.GET_SECRET
    assert (params.account, params.kind, params.identifier) == (
        "cucumber", "variable", "db/password",
    )


def test_absent_resource_id_leaves_all_components_unset():
    params = parse_dev_request({"action": "list_accounts"})
    assert (params.account, params.kind, params.identifier) == (None, None, None)


def test_other_params_carried_through():
    params = parse_dev_request({
        "action": "create_secret", "resource_id": "a:variable:x",
        "value": "hello", "role_id": "a:user:b", "id": "acct", "version": "2",
    })
    assert params.value == "hello"
    assert params.role_id == "a:user:b"
    assert params.id == "acct"
    assert params.version_number() == 2


def test_input_mapping_not_mutated():
    query = {"action": "get_secret", "resource_id": "a:variable:x"}
    parse_dev_request(query)
    assert query == {"action": "get_secret", "resource_id": "a:variable:x"}


@pytest.mark.parametrize("value", [None, ""])
def test_require_names_missing_parameter(value):
    params = DevRequest(action=DevAction.CREATE_ACCOUNT, id=value)
    with pytest.raises(MissingParameterError) as exc:
        params.require("id")
    assert exc.value.message == "id required"
    assert exc.value.parameter == "id"


def test_require_resource_without_resource_id():
    with pytest.raises(MissingParameterError) as exc:
        DevRequest(action=DevAction.GET_SECRET).require_resource()
    assert exc.value.parameter == "resource_id"


@pytest.mark.parametrize("version", ["0", "-1", "abc", "1.5", "²", "9" * 30, "2147483648"])
def test_bad_version_is_caller_error(version):
    params = DevRequest(action=DevAction.GET_SECRET, version=version)
    with pytest.raises(CallerError):
        params.version_number()


def test_largest_version_accepted():
    params = DevRequest(action=DevAction.GET_SECRET, version="2147483647")
    assert params.version_number() == 2**31 - 1

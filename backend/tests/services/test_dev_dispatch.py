"""Dev Dispatch — explicit action routing, with a recording fake in place of handlers.

Tests cover:
    - Every DevAction has exactly one handler; load_policy shares create_secret's
    - Parse failures (no action, malformed resource_id, unknown tag) invoke no handler
    - The handler's Response is returned as-is
"""

import pytest
from fastapi.responses import PlainTextResponse

from devgate.core.domain_types import DevAction
from devgate.core.errors import (
    ActionNotRecognizedError, ActionRequiredError, MalformedResourceIdError,
)
from devgate.services.dev_dispatch import DevDispatch


class _RecordingHandlers:
    """Stands in for DevHandlers; records (method, params) per call."""

    def __init__(self):
        self.calls = []
        self.response = PlainTextResponse("sentinel")

    def __getattr__(self, name):
        async def _handler(params):
            self.calls.append((name, params))
            return self.response
        return _handler


@pytest.fixture
def recorder():
    return _RecordingHandlers()


@pytest.fixture
def dispatch(recorder):
    return DevDispatch(None, handlers=recorder)


def test_every_action_registered(dispatch):
    assert set(dispatch._handlers) == set(DevAction)


@pytest.mark.parametrize("query, error", [
    ({}, ActionRequiredError),
    ({"action": ""}, ActionRequiredError),
    ({"action": "get_secret", "resource_id": "x:y"}, MalformedResourceIdError),
    ({"action": "get_secret", "resource_id": "a:b:c:d"}, MalformedResourceIdError),
    ({"action": "bogus"}, ActionNotRecognizedError),
    ({"action": "LIST_ACCOUNTS"}, ActionNotRecognizedError),
])
async def test_parse_failures_invoke_nothing(dispatch, recorder, query, error):
    with pytest.raises(error):
        await dispatch.execute(query)
    assert recorder.calls == []


async def test_routes_to_matching_handler(dispatch, recorder):
    response = await dispatch.execute({"action": "retrieve_api_key", "role_id": "a:user:b"})

    assert response is recorder.response
    [(name, params)] = recorder.calls
    assert name == "retrieve_api_key"
    assert params.role_id == "a:user:b"


async def test_load_policy_aliases_create_secret(dispatch, recorder):
    await dispatch.execute({
        "action": "load_policy", "resource_id": "cucumber:policy:root", "value": "- !user bob",
    })
    [(name, params)] = recorder.calls
    assert name == "create_secret"
    assert params.action is DevAction.LOAD_POLICY
    assert (params.account, params.kind, params.identifier) == ("cucumber", "policy", "root")

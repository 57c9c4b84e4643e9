"""Domain Types — resource id parsing and impersonated identities.

Tests:
    - ResourceId.parse splits account:kind:identifier, identifier may contain '/'
    - Any segment count other than 3, or an empty segment, is MalformedResourceIdError
    - Identity.root / Identity.account_admin build the fixed impersonation roles
    - DevAction holds exactly the eight recognized tags
"""

import pytest

from devgate.core.domain_types import DevAction, Identity, ResourceId, ROOT_ROLE_ID
from devgate.core.errors import CallerError, MalformedResourceIdError


def test_parse_decomposes_triple():
    resource = ResourceId.parse("cucumber:variable:db/password")
    assert resource.account == "cucumber"
    assert resource.kind == "variable"
    assert resource.identifier == "db/password"


def test_str_round_trips_to_text():
    assert str(ResourceId.parse("cucumber:variable:x")) == "cucumber:variable:x"


@pytest.mark.parametrize("text", [
    "cucumber",
    "cucumber:variable",
    "cucumber:variable:db:password",
    "a:b:c:d:e",
    "cucumber::x",
    ":variable:x",
])
def test_parse_rejects_wrong_shape(text):
    with pytest.raises(MalformedResourceIdError) as exc:
        ResourceId.parse(text)
    assert exc.value.message == "malformed resource_id"
    assert isinstance(exc.value, CallerError)


def test_root_identity_is_fixed():
    assert Identity.root().role_id == ROOT_ROLE_ID
    assert Identity.root().is_root
    assert Identity.root() == Identity.root()


def test_account_admin_identity():
    admin = Identity.account_admin("cucumber")
    assert admin.role_id == "cucumber:user:admin"
    assert admin.account == "cucumber"
    assert admin.is_admin_of("cucumber")
    assert not admin.is_admin_of("other")
    assert not admin.is_root


def test_dev_action_tags():
    assert {a.value for a in DevAction} == {
        "create_account", "create_secret", "get_secret", "load_policy",
        "list_accounts", "destroy_account", "retrieve_api_key", "purge",
    }

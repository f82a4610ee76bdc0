import json

import pytest

from src.law_office.law_office.access.policy import PermissionPolicy, load_policy
from src.law_office.law_office.core.enums import Action
from src.law_office.law_office.core.exceptions import PermissionDenied, ValidationError


def test_default_policy_roles(policy):
    assert policy.can("admin", Action.DELETE)
    assert policy.can("Associé Senior", Action.DELETE)
    assert policy.can("Avocat", Action.UPDATE)
    assert not policy.can("Avocat", Action.DELETE)
    assert policy.can("Avocat Junior", Action.CREATE)
    assert not policy.can("Avocat Junior", Action.DELETE)
    assert policy.allowed("Stagiaire") == frozenset({Action.READ})


def test_unknown_role_has_no_permissions(policy):
    assert policy.allowed("Concierge") == frozenset()
    with pytest.raises(PermissionDenied):
        policy.require("Concierge", Action.READ)
    with pytest.raises(PermissionDenied):
        policy.require(None, Action.READ)


def test_load_policy_from_file(tmp_path):
    path = tmp_path / "perm.json"
    path.write_text(json.dumps({"auditor": ["read"]}), encoding="utf-8")

    policy = load_policy(path)

    assert policy.roles == ["auditor"]
    policy.require("auditor", Action.READ)
    with pytest.raises(PermissionDenied):
        policy.require("auditor", Action.CREATE)


def test_policy_rejects_unknown_action():
    with pytest.raises(ValidationError):
        PermissionPolicy({"x": ["read", "approve"]})


def test_load_policy_rejects_non_object(tmp_path):
    path = tmp_path / "perm.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_policy(path)

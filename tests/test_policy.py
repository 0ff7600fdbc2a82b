"""Policy document tests for the CI/CD group."""
import json

import pytest

from stackbot.policy import assume_role_policy, policy_document, statement


ACCOUNTS = ["123456789012", "000000000001", "7", "999999999999"]


@pytest.mark.parametrize("account", ACCOUNTS)
def test_policy_is_single_assume_role_statement(account):
    doc = json.loads(assume_role_policy(account))
    assert doc["Version"] == "2012-10-17"
    assert len(doc["Statement"]) == 1
    stmt = doc["Statement"][0]
    assert set(stmt["Action"]) == {"sts:AssumeRole"}
    assert stmt["Effect"] == "Allow"
    assert stmt["Resource"] == f"arn:aws:iam::{account}:role/*"
    assert stmt["Sid"] == ""


def test_policy_is_scoped_to_account():
    doc = json.loads(assume_role_policy("123456789012"))
    assert doc["Statement"][0]["Resource"] == "arn:aws:iam::123456789012:role/*"


def test_policy_is_deterministic():
    assert assume_role_policy("123456789012") == assume_role_policy("123456789012")


def test_policy_differs_per_account():
    assert assume_role_policy("123456789012") != assume_role_policy("210987654321")


def test_policy_key_order_matches_iam_grammar():
    doc = json.loads(assume_role_policy("123456789012"))
    assert list(doc) == ["Version", "Statement"]
    assert list(doc["Statement"][0]) == ["Action", "Effect", "Resource", "Sid"]


def test_policy_uses_partition():
    doc = json.loads(assume_role_policy("123456789012", partition="aws-cn"))
    assert doc["Statement"][0]["Resource"] == "arn:aws-cn:iam::123456789012:role/*"


def test_statement_rejects_unknown_effect():
    with pytest.raises(ValueError):
        statement(["sts:AssumeRole"], "*", effect="Maybe")


def test_policy_document_with_deny():
    doc = json.loads(policy_document(
        statement(["iam:*"], "*", effect="Deny", sid="NoIam"),
    ))
    assert doc["Statement"] == [
        {"Action": ["iam:*"], "Effect": "Deny", "Resource": "*", "Sid": "NoIam"},
    ]

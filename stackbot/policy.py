"""
IAM policy documents for the CI/CD group.

The group is only allowed to call sts:AssumeRole. This allows its members to
"assume the role" of a more permissive IAM Role when they go to update a stack.
"""
import json

VERSION = "2012-10-17"
EFFECTS = ("Allow", "Deny")


def statement(actions, resource, effect="Allow", sid=""):
    if effect not in EFFECTS:
        raise ValueError(f"Unknown policy effect {effect!r}")
    return {
        "Action": list(actions),
        "Effect": effect,
        "Resource": resource,
        "Sid": sid,
    }


def policy_document(*statements):
    return json.dumps({
        "Version": VERSION,
        "Statement": list(statements),
    })


def role_arn_pattern(account, partition="aws"):
    """
    Every IAM role in the given account.
    """
    return f"arn:{partition}:iam::{account}:role/*"


def assume_role_policy(account, partition="aws"):
    """
    Allow anybody holding this policy to call sts:AssumeRole on any role in
    the given account.

    The account is interpolated as-is; a bad account id gives a valid
    document that matches nothing.
    """
    return policy_document(
        statement(["sts:AssumeRole"], role_arn_pattern(account, partition)),
    )

"""
Declares the CI/CD user, its credentials, and the group that lets it assume
roles.

Each step is a function taking the RunContext. Steps run in order and any
failure stops the run; the Pulumi engine owns ordering, diffing, and rollback
of the remote resources.
"""
import functools

import pulumi
from pulumi_aws import iam

from putils import get_caller_identity, opts

from .config import Settings
from .policy import assume_role_policy

__all__ = 'RunContext', 'Provisioned', 'InvalidAccountError', 'provision', 'STEPS'

STEPS = (
    'identity', 'user', 'access_key', 'group', 'membership', 'policy', 'group_policy',
)


class InvalidAccountError(ValueError):
    """
    Raised if the caller identity doesn't have a usable account id
    """


class RunContext:
    """
    State for one provisioning run.

    Holds the settings, the parent component (if any), the resolved identity,
    and what has been declared so far, in order.
    """
    def __init__(self, name, settings=None, *, parent=None):
        if settings is None:
            settings = Settings()
        self.name = name
        self.settings = settings
        self.parent = parent
        self.identity = None
        self.declared = {}
        self.failed = None

    def opts(self, **kwargs):
        if self.parent is not None:
            kwargs.setdefault('parent', self.parent)
        return opts(**kwargs)

    def log(self, level, msg):
        getattr(pulumi, level)(msg, resource=self.parent)

    def summary(self):
        done = len(self.declared)
        return f"{done} of {len(STEPS)} steps done ({', '.join(self.declared) or 'none'})"


class Provisioned:
    """
    Everything a successful run declared.
    """
    def __init__(self, identity, policy, user, access_key, group, membership, group_policy):
        self.identity = identity
        self.policy = policy
        self.user = user
        self.access_key = access_key
        self.group = group
        self.membership = membership
        self.group_policy = group_policy


def step(name):
    """
    Record a step's result in the context, or log how far we got and re-raise.
    """
    def _(func):
        @functools.wraps(func)
        def wrapper(ctx, *pargs, **kwargs):
            try:
                rv = func(ctx, *pargs, **kwargs)
            except Exception as exc:
                ctx.failed = name
                ctx.log('error', f"{ctx.name}: {name} failed: {exc}; {ctx.summary()}")
                raise
            ctx.declared[name] = rv
            ctx.log('debug', f"{ctx.name}: {name} done")
            return rv
        return wrapper
    return _


@step('identity')
def resolve_identity(ctx):
    identity = get_caller_identity()
    account = identity.account
    if not (isinstance(account, str) and account.isdigit() and account.isascii()):
        raise InvalidAccountError(f"Caller identity has no usable account id: {account!r}")
    ctx.identity = identity
    return identity


@step('user')
def declare_user(ctx):
    settings = ctx.settings
    return iam.User(
        f"{ctx.name}-user",
        name=settings.user_name,
        path=settings.user_path,
        tags=settings.tags,
        **ctx.opts(),
    )


@step('access_key')
def declare_access_key(ctx, user):
    # Credentials that allow API requests to be made as the user
    return iam.AccessKey(
        f"{ctx.name}-access-key",
        user=user.name,
        **ctx.opts(),
    )


@step('group')
def declare_group(ctx):
    return iam.Group(
        f"{ctx.name}-group",
        name=ctx.settings.group_name,
        **ctx.opts(),
    )


@step('membership')
def declare_membership(ctx, group, user):
    return iam.GroupMembership(
        f"{ctx.name}-membership",
        name=ctx.settings.membership_name,
        group=group.name,
        users=[user.name],
        **ctx.opts(),
    )


@step('policy')
def build_policy(ctx):
    identity = ctx.identity
    return assume_role_policy(identity.account, identity.partition)


@step('group_policy')
def declare_group_policy(ctx, group, policy):
    return iam.GroupPolicy(
        f"{ctx.name}-policy",
        name=ctx.settings.policy_name,
        group=group.name,
        policy=policy,
        **ctx.opts(),
    )


def provision(ctx):
    """
    Run every step against the given context.

    Nothing is declared if the identity can't be resolved. The first failing
    step's exception propagates unchanged.
    """
    identity = resolve_identity(ctx)
    ctx.log('info', f"{ctx.name}: provisioning CI/CD access in account {identity.account}")

    user = declare_user(ctx)
    access_key = declare_access_key(ctx, user)
    group = declare_group(ctx)
    membership = declare_membership(ctx, group, user)

    policy = build_policy(ctx)
    group_policy = declare_group_policy(ctx, group, policy)

    return Provisioned(
        identity=identity,
        policy=policy,
        user=user,
        access_key=access_key,
        group=group,
        membership=membership,
        group_policy=group_policy,
    )

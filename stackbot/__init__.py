"""
IAM access for running Pulumi stack updates from CI/CD.

A service user with an access key, in a group whose only permission is to
assume roles in the same account.
"""
import pulumi

from putils import component

from .config import Settings, InvalidSettingsError, load_settings
from .driver import RunContext, InvalidAccountError, provision
from .policy import assume_role_policy

__all__ = (
    'CicdAccess', 'export_outputs', 'Settings', 'InvalidSettingsError', 'load_settings',
    'RunContext', 'InvalidAccountError', 'provision', 'assume_role_policy',
)


@component('stackbot:index:CicdAccess', outputs=[
    'user', 'access_key', 'group', 'membership', 'group_policy', 'policy', 'account_id',
])
def CicdAccess(self, name, settings=None, opts=None):
    """
    The CI/CD user, its access key, and the group allowed to assume roles.
    """
    ctx = RunContext(name, settings, parent=self)
    done = provision(ctx)
    return {
        'user': done.user,
        'access_key': done.access_key,
        'group': done.group,
        'membership': done.membership,
        'group_policy': done.group_policy,
        'policy': done.policy,
        'account_id': done.identity.account,
        'context': ctx,
    }


def export_outputs(access, export=pulumi.export):
    """
    Stack outputs CI needs to be configured from `pulumi stack output`.
    """
    export('user_name', access.user.name)
    export('user_arn', access.user.arn)
    export('group_name', access.group.name)
    export('access_key_id', access.access_key.id)
    export('secret_access_key', pulumi.Output.secret(access.access_key.secret))

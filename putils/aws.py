import pulumi_aws

from .localstack import invoke_opts

__all__ = 'CallerIdentity', 'get_caller_identity', 'partition_of'


class CallerIdentity:
    """
    The account, partition, and ARN the provider is authorized as.
    """
    def __init__(self, account, arn=None, user_id=None):
        self.account = account
        self.arn = arn
        self.user_id = user_id

    @property
    def partition(self):
        return partition_of(self.arn)

    def __repr__(self):
        return f"<CallerIdentity account={self.account!r} arn={self.arn!r}>"


def partition_of(arn, default='aws'):
    """
    Pulls the partition (aws, aws-cn, aws-us-gov) out of an ARN.
    """
    if not arn or not arn.startswith('arn:'):
        return default
    parts = arn.split(':')
    return parts[1] or default


def get_caller_identity(**kwargs):
    """
    Look up who the current provider credentials belong to.

    Blocks on the invoke; errors from the provider are not caught.
    """
    result = pulumi_aws.get_caller_identity(opts=invoke_opts(**kwargs))
    return CallerIdentity(
        account=result.account_id,
        arn=result.arn,
        user_id=result.user_id,
    )

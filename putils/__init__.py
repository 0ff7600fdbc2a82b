from .aws import CallerIdentity, get_caller_identity, partition_of
from .component import component
from .localstack import PROVIDER, invoke_opts, localstack_provider, opts

__all__ = (
    'CallerIdentity', 'get_caller_identity', 'partition_of',
    'component',
    'PROVIDER', 'invoke_opts', 'localstack_provider', 'opts',
)

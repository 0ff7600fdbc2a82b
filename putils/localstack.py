import os

import pulumi
import pulumi_aws


def localstack_provider(name="localstack"):
    """
    An AWS provider pointed at a local localstack for IAM and STS.
    """
    return pulumi_aws.Provider(
        name,
        skip_credentials_validation=True,
        skip_metadata_api_check=True,
        access_key="mockAccessKey",
        secret_key="mockSecretKey",
        region='us-east-1',
        endpoints=[{
            'iam': "http://localhost:4566",
            'sts': "http://localhost:4566",
        }],
    )


PROVIDER = None

if os.environ.get('STAGE') == 'local':
    PROVIDER = localstack_provider()


def opts(**kwargs):
    """
    Defines the opts for resources, including any localstack config.

    localstack config is only applied if this is a top-level resource (does not
    have a parent). Children inherit it from their parent, so top-level
    components must always be given **opts().

    Usage:
    >>> Resource(..., **opts(...))
    """
    if PROVIDER is not None and kwargs.get('parent') is None:
        # Unless a parent is set, in which case lets use inheritance
        kwargs.setdefault('provider', PROVIDER)
    return {
        'opts': pulumi.ResourceOptions(**kwargs)
    }


def invoke_opts(**kwargs):
    """
    Like opts(), but for data source calls.
    """
    if PROVIDER is not None:
        kwargs.setdefault('provider', PROVIDER)
    if not kwargs:
        return None
    return pulumi.InvokeOptions(**kwargs)

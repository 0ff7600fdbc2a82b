import pulumi

__all__ = 'Settings', 'InvalidSettingsError', 'load_settings'

DEFAULT_USER_NAME = 'Jenkins-pulumi-bot'
DEFAULT_USER_PATH = '/system/'
DEFAULT_GROUP_NAME = 'pulumiStackUpdaters'
DEFAULT_PURPOSE = 'Account used to perform Pulumi stack updates on CI/CD.'


class InvalidSettingsError(ValueError):
    """
    Raised if the stack configuration can't describe valid IAM resources
    """


class Settings:
    """
    Names and tags for the CI/CD resources.
    """
    def __init__(self, *, user_name=DEFAULT_USER_NAME, user_path=DEFAULT_USER_PATH,
                 group_name=DEFAULT_GROUP_NAME, purpose=DEFAULT_PURPOSE):
        if not user_name:
            raise InvalidSettingsError("userName must not be empty")
        if not group_name:
            raise InvalidSettingsError("groupName must not be empty")
        if not user_path or not (user_path.startswith('/') and user_path.endswith('/')):
            raise InvalidSettingsError(f"userPath must begin and end with '/', got {user_path!r}")
        self.user_name = user_name
        self.user_path = user_path
        self.group_name = group_name
        self.purpose = purpose

    @property
    def tags(self):
        return {'purpose': self.purpose}

    @property
    def membership_name(self):
        return 'cicdUserMembership'

    @property
    def policy_name(self):
        return f'{self.group_name}Policy'

    def __repr__(self):
        return (
            f"<Settings user={self.user_path}{self.user_name} "
            f"group={self.group_name}>"
        )


def load_settings(config=None):
    """
    Read Settings from the stackbot config namespace, filling in defaults.
    """
    if config is None:
        config = pulumi.Config('stackbot')
    return Settings(
        user_name=config.get('userName') or DEFAULT_USER_NAME,
        user_path=config.get('userPath') or DEFAULT_USER_PATH,
        group_name=config.get('groupName') or DEFAULT_GROUP_NAME,
        purpose=config.get('purpose') or DEFAULT_PURPOSE,
    )

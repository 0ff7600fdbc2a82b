import pulumi

from putils import opts
from stackbot import CicdAccess, export_outputs, load_settings

settings = load_settings(pulumi.Config('stackbot'))

access = CicdAccess('cicd', settings=settings, **opts())

export_outputs(access)

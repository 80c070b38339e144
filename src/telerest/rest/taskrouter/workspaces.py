"""TaskRouter workspaces. Lists here use the ``meta`` pagination envelope."""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource
from telerest.rest.taskrouter.activities import Activities
from telerest.rest.taskrouter.statistics import WorkspaceStatistics
from telerest.rest.taskrouter.workers import Workers


class Workspace(InstanceResource):
    inheritance_key = "workspace_sid"
    subresources = {
        "activities": Activities,
        "workers": Workers,
        "statistics": WorkspaceStatistics,
    }


class Workspaces(Listable, Gettable, Creatable, ListResource):
    path_template = "/Workspaces"
    instance_class = Workspace

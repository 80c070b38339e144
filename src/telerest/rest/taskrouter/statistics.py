"""Statistics singletons: one per workspace and one per worker, no identifier."""

from telerest.rest.instance_resource import InstanceResource


class WorkspaceStatistics(InstanceResource):
    path_template = "/Workspaces/{workspace_sid}/Statistics"


class WorkerStatistics(InstanceResource):
    path_template = "/Workspaces/{workspace_sid}/Workers/{worker_sid}/Statistics"

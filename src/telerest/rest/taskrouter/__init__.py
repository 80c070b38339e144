from telerest.rest.taskrouter.activities import Activities, Activity
from telerest.rest.taskrouter.statistics import WorkerStatistics, WorkspaceStatistics
from telerest.rest.taskrouter.workers import Worker, Workers
from telerest.rest.taskrouter.workspaces import Workspace, Workspaces

__all__ = [
    "Activities",
    "Activity",
    "Worker",
    "WorkerStatistics",
    "Workers",
    "Workspace",
    "WorkspaceStatistics",
    "Workspaces",
]

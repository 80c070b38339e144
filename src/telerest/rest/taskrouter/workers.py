from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource
from telerest.rest.taskrouter.statistics import WorkerStatistics


class Worker(InstanceResource):
    inheritance_key = "worker_sid"
    subresources = {"statistics": WorkerStatistics}


class Workers(Listable, Gettable, Creatable, ListResource):
    path_template = "/Workspaces/{workspace_sid}/Workers"
    instance_class = Worker

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource


class Activity(InstanceResource):
    pass


class Activities(Listable, Gettable, Creatable, ListResource):
    path_template = "/Workspaces/{workspace_sid}/Activities"
    instance_class = Activity

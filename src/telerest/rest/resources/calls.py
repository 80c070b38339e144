"""Voice calls, with the recordings and notifications they produced."""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource


class Recording(InstanceResource):
    pass


class Recordings(Listable, Gettable, ListResource):
    path_template = "/Accounts/{account_sid}/Calls/{call_sid}/Recordings"
    instance_class = Recording


class Notification(InstanceResource):
    pass


class Notifications(Listable, Gettable, ListResource):
    path_template = "/Accounts/{account_sid}/Calls/{call_sid}/Notifications"
    instance_class = Notification


class Call(InstanceResource):
    inheritance_key = "call_sid"
    subresources = {
        "recordings": Recordings,
        "notifications": Notifications,
    }

    def hangup(self) -> InstanceResource:
        return self.update(status="completed")


class Calls(Listable, Gettable, Creatable, ListResource):
    path_template = "/Accounts/{account_sid}/Calls"
    instance_class = Call

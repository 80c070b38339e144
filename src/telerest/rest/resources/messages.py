"""Messages and their media."""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource


class MediaInstance(InstanceResource):
    pass


class Media(Listable, Gettable, ListResource):
    path_template = "/Accounts/{account_sid}/Messages/{message_sid}/Media"
    list_key = "media_list"
    instance_class = MediaInstance


class Message(InstanceResource):
    inheritance_key = "message_sid"
    subresources = {"media": Media}


class Messages(Listable, Gettable, Creatable, ListResource):
    path_template = "/Accounts/{account_sid}/Messages"
    instance_class = Message

"""Accounts: the root of every 2010-04-01 resource path."""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource
from telerest.rest.resources.calls import Calls
from telerest.rest.resources.messages import Messages
from telerest.rest.resources.phone_numbers import AvailablePhoneNumbers
from telerest.rest.resources.usage import Usage


class Account(InstanceResource):
    inheritance_key = "account_sid"
    subresources = {
        "messages": Messages,
        "calls": Calls,
        "usage": Usage,
        "available_phone_numbers": AvailablePhoneNumbers,
    }


class Accounts(Listable, Gettable, Creatable, ListResource):
    path_template = "/Accounts"
    instance_class = Account

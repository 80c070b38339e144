"""Available phone numbers, addressed by ISO country code instead of a sid."""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Gettable, Listable, ListResource


class AvailablePhoneNumber(InstanceResource):
    pass


class _NumberSearch(Listable, ListResource):
    list_key = "available_phone_numbers"
    instance_class = AvailablePhoneNumber


class Local(_NumberSearch):
    path_template = "/Accounts/{account_sid}/AvailablePhoneNumbers/{country_code}/Local"


class TollFree(_NumberSearch):
    path_template = "/Accounts/{account_sid}/AvailablePhoneNumbers/{country_code}/TollFree"


class Mobile(_NumberSearch):
    path_template = "/Accounts/{account_sid}/AvailablePhoneNumbers/{country_code}/Mobile"


class Country(InstanceResource):
    inheritance_key = "country_code"
    subresources = {
        "local": Local,
        "toll_free": TollFree,
        "mobile": Mobile,
    }


class AvailablePhoneNumbers(Listable, Gettable, ListResource):
    path_template = "/Accounts/{account_sid}/AvailablePhoneNumbers"
    list_key = "countries"
    instance_id_key = "country_code"
    instance_class = Country

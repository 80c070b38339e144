"""
Usage records and triggers.

``Usage`` itself exposes no verbs; it only groups its two components. The
record subcategories (daily, monthly, ...) are components of ``Records`` that
share the ``Record`` instance type and the ``usage_records`` list key.
"""

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.list_resource import Creatable, Gettable, Listable, ListResource


class Record(InstanceResource):
    pass


class _RecordList(Listable, ListResource):
    list_key = "usage_records"
    instance_class = Record


class Daily(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/Daily"


class Monthly(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/Monthly"


class Yearly(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/Yearly"


class AllTime(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/AllTime"


class Today(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/Today"


class Yesterday(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/Yesterday"


class ThisMonth(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/ThisMonth"


class LastMonth(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records/LastMonth"


class Records(_RecordList):
    path_template = "/Accounts/{account_sid}/Usage/Records"
    components = {
        "daily": Daily,
        "monthly": Monthly,
        "yearly": Yearly,
        "all_time": AllTime,
        "today": Today,
        "yesterday": Yesterday,
        "this_month": ThisMonth,
        "last_month": LastMonth,
    }


class Trigger(InstanceResource):
    pass


class Triggers(Listable, Gettable, Creatable, ListResource):
    path_template = "/Accounts/{account_sid}/Usage/Triggers"
    list_key = "usage_triggers"
    instance_class = Trigger


class Usage(ListResource):
    path_template = "/Accounts/{account_sid}/Usage"
    components = {
        "records": Records,
        "triggers": Triggers,
    }

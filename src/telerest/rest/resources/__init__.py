from telerest.rest.resources.accounts import Account, Accounts
from telerest.rest.resources.calls import Call, Calls, Notification, Notifications, Recording, Recordings
from telerest.rest.resources.messages import Media, MediaInstance, Message, Messages
from telerest.rest.resources.phone_numbers import AvailablePhoneNumber, AvailablePhoneNumbers, Country
from telerest.rest.resources.usage import Record, Records, Trigger, Triggers, Usage

__all__ = [
    "Account",
    "Accounts",
    "AvailablePhoneNumber",
    "AvailablePhoneNumbers",
    "Call",
    "Calls",
    "Country",
    "Media",
    "MediaInstance",
    "Message",
    "Messages",
    "Notification",
    "Notifications",
    "Record",
    "Records",
    "Recording",
    "Recordings",
    "Trigger",
    "Triggers",
    "Usage",
]

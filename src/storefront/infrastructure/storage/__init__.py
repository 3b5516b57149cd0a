"""JSON file storage - flat record files under the data directory."""

from .json_file_store import JsonFileStore
from .json_contact_repository import JsonContactRepository
from .json_order_repository import JsonOrderRepository
from .json_profile_repository import JsonProfileRepository

CONTACTS_FILE = "contacts.json"
ORDERS_FILE = "orders.json"
PROFILES_FILE = "profiles.json"

__all__ = [
    "JsonFileStore",
    "JsonContactRepository",
    "JsonOrderRepository",
    "JsonProfileRepository",
    "CONTACTS_FILE",
    "ORDERS_FILE",
    "PROFILES_FILE",
]

"""Remote data store boundary."""

from campus_navigator.data.campus_store import CampusDataStore, DataAccessError, SupabaseCampusStore

__all__ = [
    "CampusDataStore",
    "DataAccessError",
    "SupabaseCampusStore",
]

from enum import Enum

from httpx import TransportError
from postgrest.exceptions import APIError

# PostgREST / Postgres codes for "table does not exist"
MISSING_RELATION_CODES = {"42P01", "PGRST205"}


class StoreErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"
    QUERY_FAILED = "query_failed"


class ScheduleStoreError(Exception):
    """Raised by the repository for any failure talking to the store.

    ``kind`` is only used for server-side logging. Callers still answer with
    a single generic failure.
    """

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"[{self.kind.value}] {self.message}"


def classify_error(error: Exception) -> StoreErrorKind:
    if isinstance(error, TransportError):
        return StoreErrorKind.STORE_UNAVAILABLE
    if isinstance(error, APIError) and error.code in MISSING_RELATION_CODES:
        return StoreErrorKind.NOT_FOUND
    return StoreErrorKind.QUERY_FAILED

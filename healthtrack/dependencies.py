"""
dependencies.py — FastAPI dependencies shared by the routers.
"""
from fastapi import Depends, HTTPException

from healthtrack.auth import get_bearer_token
from healthtrack.context import HealthContext
from healthtrack.log_store import LogStoreClient, LogStoreError

# Upstream statuses passed to the caller as-is; anything else becomes 502
_PASSTHROUGH = {401, 403, 404}


def upstream_error(e: LogStoreError) -> HTTPException:
    code = e.status_code if e.status_code in _PASSTHROUGH else 502
    return HTTPException(status_code=code, detail=str(e))


def get_log_store(token: str = Depends(get_bearer_token)) -> LogStoreClient:
    """A log store client acting on behalf of the caller."""
    return LogStoreClient(token=token)


def get_context(store: LogStoreClient = Depends(get_log_store)) -> HealthContext:
    """The caller's goal, profile and logs, fetched fresh for this request."""
    try:
        return HealthContext.load(store)
    except LogStoreError as e:
        raise upstream_error(e)

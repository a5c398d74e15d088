"""
log_store.py — HTTP client for the log storage backend.
The backend owns every daily log and the user profile; this service only
reads them per request and forwards submissions. Uses httpx.
"""
import logging

import httpx
from pydantic import ValidationError

from healthtrack.config import LOG_STORE_URL, LOG_STORE_TIMEOUT
from healthtrack.models.daily_log import DailyLogEntry

logger = logging.getLogger(__name__)


class LogStoreError(Exception):
    """Backend call failed. `status_code` is the upstream status, 502 for transport errors."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


def _unwrap(payload):
    # Backend answers either bare or as {"success": ..., "data": ...}
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def parse_logs(rows) -> list[DailyLogEntry]:
    """Parse raw log rows, skipping the ones without a usable date."""
    if not isinstance(rows, list):
        return []
    entries = []
    skipped = 0
    for idx, row in enumerate(rows):
        try:
            entries.append(DailyLogEntry.model_validate(row))
        except (ValidationError, TypeError) as e:
            skipped += 1
            logger.warning("Skipping log record %d: %s", idx, e)
    if skipped:
        logger.info("Skipped %d invalid log record(s)", skipped)
    return entries


class LogStoreClient:
    def __init__(
        self,
        token: str | None = None,
        base_url: str = LOG_STORE_URL,
        timeout: float = LOG_STORE_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, json: dict | None = None):
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.request(method, url, json=json, headers=self._headers())
                resp.raise_for_status()
                return resp.json() if resp.content else None
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Log store %s %s failed with %d", method, path, status)
            raise LogStoreError(f"Log store returned {status} for {method} {path}", status) from e
        except httpx.RequestError as e:
            logger.error("Log store %s %s unreachable: %s", method, path, e)
            raise LogStoreError(f"Log store unreachable: {e}") from e
        except ValueError as e:
            raise LogStoreError(f"Log store sent invalid JSON for {method} {path}") from e

    def fetch_logs(self) -> list[DailyLogEntry]:
        return parse_logs(_unwrap(self._request("GET", "/dailyLog")))

    def fetch_today(self) -> DailyLogEntry | None:
        row = _unwrap(self._request("GET", "/dailyLog/today"))
        if not isinstance(row, dict) or "date" not in row:
            return None
        logs = parse_logs([row])
        return logs[0] if logs else None

    def submit_log(self, entry: DailyLogEntry) -> DailyLogEntry:
        """Create or replace the log for `entry.date`. Returns what the backend stored."""
        row = _unwrap(self._request("POST", "/dailyLog", json=entry.to_wire()))
        logs = parse_logs([row]) if isinstance(row, dict) else []
        return logs[0] if logs else entry

    def fetch_profile(self) -> dict:
        data = _unwrap(self._request("GET", "/users/profile"))
        return data if isinstance(data, dict) else {}

    def update_profile(self, data: dict) -> dict:
        result = _unwrap(self._request("PUT", "/users/profile", json=data))
        return result if isinstance(result, dict) else {}

"""PostgREST remote store - Implements IRemoteStore port.

Talks to a Supabase project's REST endpoint:
- insert: POST   /rest/v1/{table}
- update: PATCH  /rest/v1/{table}?id=eq.{id}
- delete: DELETE /rest/v1/{table}?id=eq.{id}
- probe:  GET    /rest/v1/user_profiles?select=id&limit=1

No retries here: failed mutations are retried by the offline queue.
"""

from typing import Any, Dict, List, Optional

import httpx
import structlog

from nutrisync.domain.offline_sync.core.exceptions import RemoteStoreError
from nutrisync.domain.offline_sync.core.ports import IRemoteStore

logger = structlog.get_logger(__name__)


class PostgrestRemoteStore(IRemoteStore):
    """
    Supabase/PostgREST client implementing IRemoteStore port.

    Example:
        >>> async with PostgrestRemoteStore(url, anon_key) as remote:
        ...     row = await remote.insert("water_intake", {"user_id": "u1", "amount_ml": 250})
    """

    PROBE_TABLE = "user_profiles"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_s: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        probe_table: Optional[str] = None,
    ) -> None:
        """
        Initialize PostgREST store.

        Args:
            base_url: Project URL (e.g. https://xyz.supabase.co)
            api_key: Anon or service key
            timeout_s: Per-request timeout
            client: Preconfigured httpx client (tests)
            probe_table: Table read by the connectivity probe
        """
        self._rest_url = base_url.rstrip("/") + "/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_s))
        self._probe_table = probe_table or self.PROBE_TABLE

    async def __aenter__(self) -> "PostgrestRemoteStore":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def insert(self, table: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        rows = await self._send(
            "POST",
            table,
            operation="insert",
            json=record,
            prefer="return=representation",
        )
        return rows[0] if rows else None

    async def update(
        self, table: str, record_id: Any, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        rows = await self._send(
            "PATCH",
            table,
            operation="update",
            params={"id": f"eq.{record_id}"},
            json=updates,
            prefer="return=representation",
        )
        return rows[0] if rows else None

    async def delete(self, table: str, record_id: Any) -> None:
        await self._send(
            "DELETE",
            table,
            operation="delete",
            params={"id": f"eq.{record_id}"},
        )

    async def is_online(self) -> bool:
        try:
            response = await self._client.get(
                f"{self._rest_url}/{self._probe_table}",
                params={"select": "id", "limit": "1"},
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            logger.debug("connectivity_probe_failed", error=str(e))
            return False
        return response.status_code < 400

    async def _send(
        self,
        method: str,
        table: str,
        operation: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        prefer: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        headers = dict(self._headers)
        if prefer:
            headers["Prefer"] = prefer

        try:
            response = await self._client.request(
                method,
                f"{self._rest_url}/{table}",
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "remote_request_failed", table=table, operation=operation, error=str(e)
            )
            raise RemoteStoreError(
                f"{operation} on {table} failed: {e}", table=table, operation=operation
            ) from e

        if response.status_code >= 400:
            detail = _error_message(response)
            logger.warning(
                "remote_request_rejected",
                table=table,
                operation=operation,
                status=response.status_code,
                detail=detail,
            )
            raise RemoteStoreError(
                f"{operation} on {table} rejected ({response.status_code}): {detail}",
                table=table,
                operation=operation,
                status_code=response.status_code,
            )

        logger.debug("remote_request_ok", table=table, operation=operation)

        if not response.content:
            return []
        try:
            body = response.json()
        except ValueError:
            return []
        if isinstance(body, list):
            return body
        return [body] if isinstance(body, dict) else []


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get("message") or body.get("code") or body)
    return str(body)[:200]

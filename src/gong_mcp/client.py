"""Gong API client with HMAC request signing."""

import base64
import hashlib
import hmac
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from .config import Settings
from .errors import BadRequestError, GongAPIError
from .models import RetrieveCallDetailsInput

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = "Extended"


def encode_payload(payload: Any) -> str:
    """Serialize a payload the same way for signing and for sending."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def generate_signature(
    secret: str,
    method: str,
    path: str,
    timestamp: str,
    payload: Any = None,
) -> str:
    """Sign a request with HMAC-SHA256 over its canonical string.

    The canonical string is the method, path, timestamp and the compact JSON
    payload joined by newlines. A missing payload contributes an empty
    string; an empty mapping still serializes to ``{}``.
    """
    serialized = "" if payload is None else encode_payload(payload)
    string_to_sign = f"{method}\n{path}\n{timestamp}\n{serialized}"
    digest = hmac.new(
        secret.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _present(value: Any) -> bool:
    return value is not None and value != ""


class GongClient:
    """Async client for the Gong v2 API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GongClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.settings.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def _auth_headers(self, method: str, path: str, payload: Any) -> dict[str, str]:
        credentials = self.settings.credentials
        secret = credentials.secret()
        timestamp = utc_timestamp()
        basic = base64.b64encode(f"{credentials.access_key}:{secret}".encode("utf-8")).decode("ascii")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Basic {basic}",
            "X-Gong-AccessKey": credentials.access_key,
            "X-Gong-Timestamp": timestamp,
            "X-Gong-Signature": generate_signature(secret, method, path, timestamp, payload),
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make a signed request to the Gong API and return the decoded JSON."""
        method = method.upper()
        payload = body if body is not None else params
        headers = self._auth_headers(method, path, payload)
        content = encode_payload(body).encode("utf-8") if body is not None else None

        client = await self._get_client()
        try:
            response = await client.request(
                method,
                f"{self.base_url}{path}",
                params=params,
                content=content,
                headers=headers,
            )
            logger.debug("%s %s -> %s", method, path, response.status_code)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise GongAPIError(
                f"Gong API request failed with status {status}: {e.response.text}",
                status,
            ) from e
        except httpx.TimeoutException as e:
            raise GongAPIError("Request timed out") from e
        except httpx.RequestError as e:
            raise GongAPIError(f"Request failed: {e}") from e
        except json.JSONDecodeError as e:
            raise GongAPIError(f"Invalid JSON in Gong API response: {e}") from e

    # === Call Methods ===

    async def list_calls(
        self,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
    ) -> Any:
        """List calls, optionally bounded by a date range."""
        params: dict[str, Any] = {}
        if _present(from_date_time):
            params["fromDateTime"] = from_date_time
        if _present(to_date_time):
            params["toDateTime"] = to_date_time

        return await self._request("GET", "/calls", params=params)

    async def retrieve_call_details(self, args: RetrieveCallDetailsInput) -> Any:
        """Retrieve extensive call data, one page per invocation.

        At least one of call IDs, a date bound, or primary user IDs is
        required; a cursor on its own does not scope the query.
        """
        selectors = (args.call_ids, args.from_date_time, args.to_date_time, args.primary_user_ids)
        if not any(_present(value) for value in selectors):
            raise BadRequestError("At least one filter parameter is required")

        filter_: dict[str, Any] = {}
        if _present(args.call_ids):
            filter_["callIds"] = args.call_ids
        if _present(args.from_date_time):
            filter_["fromDateTime"] = args.from_date_time
        if _present(args.to_date_time):
            filter_["toDateTime"] = args.to_date_time
        if _present(args.primary_user_ids):
            filter_["primaryUserIds"] = args.primary_user_ids
        if _present(args.cursor):
            filter_["cursor"] = args.cursor

        # CRM fields (customer identification) only come back with Extended context
        context = args.context if _present(args.context) else DEFAULT_CONTEXT

        return await self._request(
            "POST",
            "/calls/extensive",
            body={"filter": filter_, "contentSelector": {"context": context}},
        )

    # === Transcript Methods ===

    async def retrieve_transcripts(self, call_ids: list[str]) -> Any:
        """Retrieve transcripts for the given call IDs."""
        return await self._request(
            "POST",
            "/calls/transcript",
            body={
                "filter": {
                    "callIds": call_ids,
                    "includeEntities": True,
                    "includeInteractionsSummary": True,
                    "includeTrackers": True,
                }
            },
        )

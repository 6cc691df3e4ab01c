"""Slack Web API client for the staff directory and direct messages."""

import logging
from typing import Any, Protocol

import httpx

from frontdesk.errors import ExternalServiceError
from frontdesk.schemas import Attachment

logger = logging.getLogger(__name__)

USERS_PAGE_LIMIT = 200


class MessagingClient(Protocol):
    """Directory and messaging capability used by the staff handlers."""

    async def list_users(self) -> list[dict[str, Any]]: ...

    async def post_message(
        self, recipient_id: str, text: str, attachment: Attachment, as_bot: bool = True
    ) -> dict[str, Any]: ...


class SlackClient:
    """Minimal async client for the two Slack Web API methods the relay uses."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://slack.com/api",
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "SlackClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, http_method: str = "GET", **kwargs) -> dict[str, Any]:
        """Invoke a Web API method and return its body.

        Raises ExternalServiceError on transport errors, non-2xx statuses,
        or a body whose `ok` field is false.
        """
        try:
            resp = await self._client.request(http_method, method, **kwargs)
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPError as e:
            raise ExternalServiceError(method, str(e)) from e
        except ValueError as e:
            raise ExternalServiceError(method, "response is not valid JSON") from e

        if not isinstance(body, dict):
            raise ExternalServiceError(method, "unexpected response shape")
        if not body.get("ok"):
            raise ExternalServiceError(method, body.get("error", "unknown_error"))
        return body

    async def list_users(self) -> list[dict[str, Any]]:
        """Return every member of the workspace, following cursor pagination."""
        users: list[dict[str, Any]] = []
        cursor = ""
        while True:
            params: dict[str, Any] = {"limit": USERS_PAGE_LIMIT}
            if cursor:
                params["cursor"] = cursor
            body = await self._call("users.list", params=params)
            users.extend(body.get("members") or [])
            cursor = (body.get("response_metadata") or {}).get("next_cursor") or ""
            if not cursor:
                break
        logger.debug("Fetched %d users from Slack", len(users))
        return users

    async def post_message(
        self, recipient_id: str, text: str, attachment: Attachment, as_bot: bool = True
    ) -> dict[str, Any]:
        """Post `text` with a single attachment to a user or channel."""
        payload = {
            "channel": recipient_id,
            "text": text,
            "as_user": as_bot,
            "attachments": [
                {
                    **attachment.model_dump(),
                    "mrkdwn_in": ["pretext"],
                }
            ],
        }
        return await self._call("chat.postMessage", http_method="POST", json=payload)

"""Staff directory and visitor notification routes."""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from frontdesk.config import Settings, get_settings
from frontdesk.errors import BadRequest, ExternalServiceError
from frontdesk.messaging.slack import MessagingClient, SlackClient
from frontdesk.responses import respond_with_json
from frontdesk.schemas import OperationResult
from frontdesk.staff import service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/staff", tags=["staff"])


async def get_messaging_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[MessagingClient, None]:
    """Dependency: yields a Slack client authenticated with the bot token."""
    async with SlackClient(
        settings.BOT_TOKEN,
        base_url=settings.SLACK_API_URL,
        timeout=settings.SLACK_TIMEOUT,
    ) as client:
        yield client


@router.get("")
async def list_staff(client: MessagingClient = Depends(get_messaging_client)) -> Response:
    """List every staff member in the directory as `{id, profile}` records."""
    try:
        staff = await service.list_staff(client)
    except ExternalServiceError as e:
        logger.error("There was an error getting the list of staff members: %s", e)
        return respond_with_json(500, [])

    return respond_with_json(200, staff)


@router.post("/{staff_id}")
async def notify_staff(
    staff_id: str,
    request: Request,
    client: MessagingClient = Depends(get_messaging_client),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Tell a staff member that a visitor is waiting for them at the front desk.

    The body is a visitor announcement:
    `{"firstName", "lastName", "purpose", "staffId"}`.
    """
    try:
        visitor = service.parse_announcement(await request.body())
    except BadRequest as e:
        logger.warning("Rejected announcement for %s: %s", staff_id, e)
        return respond_with_json(
            400, OperationResult(success=False, message="Invalid visitor announcement")
        )

    try:
        await service.notify_staff(client, staff_id, visitor, settings.ATTACHMENT_COLOR)
    except ExternalServiceError as e:
        logger.error("There was an error messaging %s: %s", staff_id, e)
        return respond_with_json(
            500, OperationResult(success=False, message="Failed to send message")
        )

    return respond_with_json(
        201, OperationResult(success=True, message="Message successfully sent")
    )

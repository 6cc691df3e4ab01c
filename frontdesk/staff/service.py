"""Staff directory lookup and visitor notification logic."""

import logging

from pydantic import ValidationError

from frontdesk.errors import BadRequest, ExternalServiceError
from frontdesk.messaging.slack import MessagingClient
from frontdesk.schemas import Attachment, StaffMember, VisitorAnnouncement

logger = logging.getLogger(__name__)

GREETING_TEMPLATE = "Hey {staff_id}, {first_name} {last_name} is here for you at the front desk."
PURPOSE_PRETEXT = "*Purpose*"


def parse_announcement(body: bytes) -> VisitorAnnouncement:
    """Decode a kiosk request body, raising BadRequest on any shape error."""
    try:
        return VisitorAnnouncement.model_validate_json(body)
    except ValidationError as e:
        raise BadRequest(f"invalid visitor announcement: {e.error_count()} error(s)") from e


def format_greeting(visitor: VisitorAnnouncement) -> str:
    # Greets with the identifier sent by the kiosk, not a resolved display name.
    return GREETING_TEMPLATE.format(
        staff_id=visitor.staff_id,
        first_name=visitor.first_name,
        last_name=visitor.last_name,
    )


def build_attachment(visitor: VisitorAnnouncement, color: str) -> Attachment:
    return Attachment(color=color, pretext=PURPOSE_PRETEXT, text=visitor.purpose)


async def list_staff(client: MessagingClient) -> list[StaffMember]:
    """Fetch the directory and reduce each record to id + profile."""
    users = await client.list_users()
    try:
        staff = [
            StaffMember.model_validate({"id": user["id"], "profile": user.get("profile") or {}})
            for user in users
        ]
    except (KeyError, TypeError, ValidationError) as e:
        raise ExternalServiceError("users.list", f"unexpected user record: {e}") from e
    logger.debug("Directory returned %d staff members: %s", len(staff), [s.id for s in staff])
    return staff


async def notify_staff(
    client: MessagingClient,
    staff_id: str,
    visitor: VisitorAnnouncement,
    color: str,
) -> None:
    """Send the visitor announcement to `staff_id` as the bot user."""
    text = format_greeting(visitor)
    attachment = build_attachment(visitor, color)
    logger.debug("Notifying %s: %r", staff_id, visitor)
    await client.post_message(staff_id, text, attachment, as_bot=True)
    logger.info("Notified %s of visitor %s %s", staff_id, visitor.first_name, visitor.last_name)

import logging
from typing import Any, Callable, Dict, Optional

from ..config import settings
from ..time_utils import now_ms
from .schemas import ApprovalLogEntry, UserRecord, UserStatus

logger = logging.getLogger(__name__)


def is_approval_transition(before_status: Any, after_status: Any) -> bool:
    return before_status == UserStatus.PENDING.value and after_status == UserStatus.APPROVED.value


def notify_approval(platform, uid: str, before: Optional[Dict[str, Any]], after: Optional[Dict[str, Any]],
                    clock: Callable[[], int] = now_ms) -> Optional[str]:
    """
    Send the approval push when a user moves from pending to approved

    Args:
        platform: Collaborator handle for FCM and Firestore
        uid: The user's ID, taken from the document path
        before: Document data before the update, None if absent
        after: Document data after the update, None if absent
        clock: Source of the log entry timestamp

    Returns:
        The FCM message ID, or None when nothing was sent
    """
    if before is None or after is None:
        logger.info(f"Missing snapshot for user {uid}, nothing to do")
        return None

    before_status = before.get('status')
    after_status = after.get('status')
    if not is_approval_transition(before_status, after_status):
        logger.debug(f"No approval transition for user {uid}: {before_status} -> {after_status}")
        return None

    token = UserRecord.model_validate(after).fcmToken
    if not isinstance(token, str) or not token:
        logger.info(f"User {uid} approved without a usable device token, skipping push")
        return None

    message_id = platform.send_message(
        token,
        settings.approval_title,
        settings.approval_body,
        {'uid': uid}
    )
    logger.info(f"Sent approval notification to user {uid}: {message_id}")

    entry = ApprovalLogEntry(uid=uid, ts=clock())
    platform.add_document(settings.notifications_collection, entry.model_dump(mode="json"))

    return message_id

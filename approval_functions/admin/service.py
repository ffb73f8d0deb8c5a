import logging
from typing import Any, Callable, Optional, Union

from ..config import settings
from ..errors import InvalidArgument, PolicyError, Unauthorized
from ..firebase import get_platform
from ..time_utils import now_ms
from .schemas import AdminAuditEntry, CallerIdentity, Promotion, PromotionResult

logger = logging.getLogger(__name__)


def validate_promotion(caller: Optional[CallerIdentity], data: Any) -> Union[Promotion, PolicyError]:
    """
    Check a promotion request without touching any collaborator.

    Args:
        caller: Identity of the caller, None for unauthenticated calls
        data: Request payload, expected to carry the target `uid`

    Returns:
        The accepted Promotion, or the PolicyError to raise
    """
    if caller is None or not caller.is_admin:
        return Unauthorized()

    target_uid = data.get('uid') if isinstance(data, dict) else None
    if not isinstance(target_uid, str) or not target_uid:
        return InvalidArgument("Missing uid")

    return Promotion(promoterUid=caller.uid, targetUid=target_uid)


def grant_admin_claim(platform, uid: str) -> None:
    """Set admin=True on the uid, keeping any other custom claims."""
    claims = platform.get_custom_claims(uid)
    claims['admin'] = True
    platform.set_custom_user_claims(uid, claims)


def promote_to_admin(platform, caller: Optional[CallerIdentity], data: Any,
                     clock: Callable[[], int] = now_ms) -> PromotionResult:
    result = validate_promotion(caller, data)
    if isinstance(result, PolicyError):
        logger.warning(f"Promotion rejected ({result.message}), caller: {caller.uid if caller else None}")
        raise result

    grant_admin_claim(platform, result.targetUid)
    logger.info(f"Admin claim granted to {result.targetUid} by {result.promoterUid}")

    entry = AdminAuditEntry(
        promoterUid=result.promoterUid,
        targetUid=result.targetUid,
        ts=clock()
    )
    platform.add_document(settings.admin_audit_collection, entry.model_dump())

    return PromotionResult(targetUid=result.targetUid)


def set_admin_claim(uid: str, platform=None) -> None:
    """One-off maintenance helper, run outside the event-driven paths."""
    platform = platform or get_platform()
    grant_admin_claim(platform, uid)
    logger.info(f"Admin claim set for {uid}")

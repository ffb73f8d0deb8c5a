import logging
from typing import Any, Dict, Optional

from firebase_functions import firestore_fn, https_fn, options

from .admin import promote_to_admin
from .admin.schemas import CallerIdentity
from .config import settings
from .errors import InfrastructureError, InvalidArgument, Unauthorized
from .firebase import get_platform
from .logging_setup import setup_logging
from .notifications import notify_approval

setup_logging()

logger = logging.getLogger(__name__)

options.set_global_options(region=settings.functions_region)


def _caller_identity(auth_data) -> Optional[CallerIdentity]:
    if auth_data is None:
        return None
    return CallerIdentity(uid=auth_data.uid, token=dict(auth_data.token or {}))


def _snapshot_data(snapshot) -> Optional[Dict[str, Any]]:
    if snapshot is None or not snapshot.exists:
        return None
    return snapshot.to_dict()


def handle_promote_call(req, platform=None) -> Dict[str, Any]:
    """Run a promoteToAdmin call and map policy errors to HttpsError."""
    caller = _caller_identity(req.auth)
    try:
        result = promote_to_admin(platform or get_platform(), caller, req.data)
    except Unauthorized as e:
        raise https_fn.HttpsError(
            code=https_fn.FunctionsErrorCode.PERMISSION_DENIED,
            message=e.message
        )
    except InvalidArgument as e:
        raise https_fn.HttpsError(
            code=https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            message=e.message
        )
    except InfrastructureError as e:
        logger.error(f"promoteToAdmin failed: {str(e)}")
        raise
    return result.model_dump()


def handle_user_updated(event, platform=None) -> Optional[str]:
    change = event.data
    before = _snapshot_data(change.before) if change is not None else None
    after = _snapshot_data(change.after) if change is not None else None
    uid = event.params['uid']
    try:
        return notify_approval(platform or get_platform(), uid, before, after)
    except InfrastructureError as e:
        logger.error(f"notifyApproval failed for user {uid}: {str(e)}")
        raise


# Deployed function names
@https_fn.on_call()
def promoteToAdmin(req: https_fn.CallableRequest) -> Dict[str, Any]:
    return handle_promote_call(req)


@firestore_fn.on_document_updated(document=settings.users_document_path)
def notifyApproval(event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot]]) -> None:
    handle_user_updated(event)

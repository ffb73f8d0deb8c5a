from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class UserStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"


class NotificationType(str, Enum):
    APPROVAL = "approval"


class UserRecord(BaseModel):
    """The fields of a Users/{uid} document this service reads"""
    model_config = ConfigDict(extra="allow")

    status: Any = None
    fcmToken: Any = None


class ApprovalLogEntry(BaseModel):
    uid: str
    type: NotificationType = NotificationType.APPROVAL
    ts: int

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

PROMOTE_TO_ADMIN = "promoteToAdmin"


class CallerIdentity(BaseModel):
    """Authenticated caller of a callable function"""
    uid: str
    token: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.token.get('admin') is True


class Promotion(BaseModel):
    promoterUid: str
    targetUid: str


class AdminAuditEntry(BaseModel):
    """Append-only record written for every admin grant"""
    promoterUid: str
    targetUid: str
    ts: int
    action: Literal["promoteToAdmin"] = PROMOTE_TO_ADMIN


class PromotionResult(BaseModel):
    status: Literal["ok"] = "ok"
    targetUid: str

from .service import is_approval_transition, notify_approval

__all__ = ["is_approval_transition", "notify_approval"]

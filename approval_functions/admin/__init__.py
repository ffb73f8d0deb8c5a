from .service import grant_admin_claim, promote_to_admin, set_admin_claim, validate_promotion

__all__ = ["grant_admin_claim", "promote_to_admin", "set_admin_claim", "validate_promotion"]

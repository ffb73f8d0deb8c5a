from typing import Optional


class PolicyError(Exception):
    """A request rejected by policy before any side effect"""

    message = "Rejected"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class Unauthorized(PolicyError):
    message = "Unauthorized"


class InvalidArgument(PolicyError):
    message = "Invalid argument"


class InfrastructureError(Exception):
    """A call to Auth, Firestore or FCM failed"""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")

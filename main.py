# Firebase loads functions from main.py in the functions source directory
from approval_functions.main import notifyApproval, promoteToAdmin

__all__ = ["notifyApproval", "promoteToAdmin"]

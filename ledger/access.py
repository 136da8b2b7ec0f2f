# =============================================================================
# ledger/access.py
# =============================================================================
# PURPOSE:
#   Caller capability passed into every mutating ledger operation.
#
# HOW IT WORKS:
#   Authentication happens elsewhere. By the time a call reaches the ledger
#   the caller has already been tagged with a role. CallerContext carries
#   that tag explicitly instead of looking it up from session state, and
#   require_management() turns a wrong role into PermissionDenied.
# =============================================================================

from dataclasses import dataclass

from config import ROLE_MANAGEMENT, ROLES
from .errors import PermissionDenied


@dataclass(frozen=True)
class CallerContext:
    role: str
    name: str = ""

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown role: {self.role!r}. Expected one of {ROLES}")

    @property
    def is_management(self):
        return self.role == ROLE_MANAGEMENT


def require_management(context, action="change financial data"):
    """Raise PermissionDenied unless the caller is management."""
    if context is None or not context.is_management:
        raise PermissionDenied(f"Permission denied. Only management can {action}.")
    return context

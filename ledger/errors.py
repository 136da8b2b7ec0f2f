# =============================================================================
# ledger/errors.py
# =============================================================================
# PURPOSE:
#   Exceptions raised by the ledger core.
#
# NOTE:
#   An unbalanced breakdown is NOT an exception. It is a normal state while
#   an operator edits figures, reported through BalanceResult instead.
# =============================================================================


class LedgerError(Exception):
    """Base class for ledger errors."""


class PermissionDenied(LedgerError):
    """The caller's role does not allow the requested change."""

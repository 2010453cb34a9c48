"""
Exception hierarchy for the minefield engine.

Validation errors stop a game from starting, logic errors flag caller bugs,
and the persistence errors separate "nothing saved" from "saved but corrupt".
"""


class MinefieldError(Exception):
    """Base class for every error raised by the package."""


# ============================================================================
# Construction
# ============================================================================

class ValidationError(MinefieldError, ValueError):
    """Board parameters rejected at construction."""


class InvalidDimension(ValidationError):
    """Rows or columns are not positive."""


class InvalidMineCount(ValidationError):
    """Mine count is negative or leaves no safe cell."""


# ============================================================================
# Flag bookkeeping
# ============================================================================

class LogicError(MinefieldError, RuntimeError):
    """Engine state was driven somewhere it can never legally be."""


class FlagLimitExceeded(LogicError):
    """Flag counter pushed above the number of mines."""


class FlagUnderflow(LogicError):
    """Flag counter pushed below zero."""


class FlagCountMismatch(LogicError):
    """Flag counter disagrees with the flagged cells on the board."""


# ============================================================================
# Persistence
# ============================================================================

class DecodeError(MinefieldError):
    """No persisted state is available."""


class MalformedState(MinefieldError, ValueError):
    """Persisted state exists but cannot be turned back into a board."""


class StateWriteError(MinefieldError):
    """Persisted state could not be written."""

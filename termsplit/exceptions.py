"""Custom exception hierarchy for termsplit.

Exception Hierarchy:
    TermsplitError (base)
    ├── SplitContractError - an occupancy transition would break an invariant
    │   ├── SlotOverflowError - a non-default slot would hold more than one split
    │   └── SlotUnderflowError - a slot count would drop below zero
    ├── LayoutFullError - every slot is taken, no new split can be created
    └── ConfigurationError - Settings/configuration issues

Usage:
    from termsplit.exceptions import SplitContractError

    try:
        occupancy = incr_position(occupancy, SplitPosition.right)
    except SplitContractError as e:
        logger.warning(f"Refusing split move: {e}")
"""

from typing import Any, Optional


class TermsplitError(Exception):
    """Base exception for all termsplit errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., panel ids, slots)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Occupancy Contract Errors
# =============================================================================


class SplitContractError(TermsplitError):
    """Base exception for occupancy contract violations.

    These indicate a caller bug, so they are never retryable.
    """

    def __init__(
        self,
        message: str = "Split occupancy contract violated",
        *,
        occupancy: Optional[tuple] = None,
        position: Optional[str] = None,
        **context: Any,
    ) -> None:
        if occupancy is not None:
            context["occupancy"] = occupancy
        if position is not None:
            context["position"] = position
        super().__init__(message, retryable=False, **context)


class SlotOverflowError(SplitContractError):
    """A non-default slot would hold more than one split."""

    def __init__(self, message: str = "Slot is already occupied", **context: Any) -> None:
        super().__init__(message, **context)


class SlotUnderflowError(SplitContractError):
    """A slot count would become negative."""

    def __init__(self, message: str = "Slot has no split to remove", **context: Any) -> None:
        super().__init__(message, **context)


# =============================================================================
# Layout Errors
# =============================================================================


class LayoutFullError(TermsplitError):
    """Every slot of a panel is occupied."""

    def __init__(
        self,
        message: str = "No free position for a new split",
        *,
        panel_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if panel_id:
            context["panel_id"] = panel_id
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TermsplitError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)

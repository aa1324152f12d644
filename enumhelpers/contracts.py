"""Fail-fast contract checks for programmer errors.

Out-of-range dereference and out-of-range indexed access are not recoverable
conditions; they are reported as `ContractViolation` subclasses (which derive
from ``AssertionError``) while checks are enabled, and skipped entirely when
`EnumHelpersConfig.checks_enabled` is false.
"""

from __future__ import annotations

from typing import Type

from enumhelpers import config
from enumhelpers.logging import get_logger

logger = get_logger(__name__)


class ContractViolation(AssertionError):
    """Base class for fatal precondition failures."""


class DereferenceOutOfRange(ContractViolation):
    """An enum iterator was dereferenced at or past its terminal value."""


class IndexOutOfRange(ContractViolation):
    """An enum array was accessed outside ``[0, size)``."""


class SizeMismatchError(ValueError):
    """An enum array was built from the wrong number of elements."""


def checks_enabled() -> bool:
    """Return True if contract checks are currently evaluated."""
    return config.CONFIG.checks_enabled


def check(condition: bool, error_type: Type[ContractViolation], message: str) -> None:
    """Fail fast if `condition` is false and checks are enabled.

    The violation is logged at ERROR level, then handed to the configured
    ``assert_handler`` if one is set, otherwise raised.

    Args:
        condition: Precondition that must hold.
        error_type: `ContractViolation` subclass describing the failure.
        message: Human-readable description of the violated precondition.

    Raises:
        ContractViolation: The given `error_type`, when no handler is configured.
    """
    if condition or not config.CONFIG.checks_enabled:
        return

    violation = error_type(message)
    logger.error(f"Contract violation ({error_type.__name__}): {message}")

    handler = config.CONFIG.assert_handler
    if handler is not None:
        handler(violation)
        return
    raise violation

"""Configuration for enumhelpers contract checks and standard-library integration."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from enumhelpers.contracts import ContractViolation

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    return value is not None and value.strip().lower() in _TRUTHY


@dataclass
class EnumHelpersConfig:
    """Build-time style switches for the enum helpers.

    Attributes:
        checks_enabled: Evaluate contract checks on dereference and indexed
            access. Defaults to ``__debug__``, so running under ``python -O``
            turns the checks off the same way optimized builds drop asserts.
        assert_handler: Optional replacement for the default fail-fast
            behaviour. Receives the violation instead of it being raised.
        std_includes: Register the containers with ``collections.abc`` when
            the package is imported. Disable to leave the ABC registry alone.
    """

    checks_enabled: bool = __debug__

    assert_handler: Optional[Callable[["ContractViolation"], None]] = None

    std_includes: bool = True

    @classmethod
    def from_env(cls) -> "EnumHelpersConfig":
        """Build a configuration from ``ENUMHELPERS_*`` environment variables.

        ``ENUMHELPERS_DISABLE_CHECKS`` turns contract checks off and
        ``ENUMHELPERS_NO_STD_INCLUDES`` skips the ``collections.abc``
        registration.
        """
        return cls(
            checks_enabled=__debug__ and not _env_flag("ENUMHELPERS_DISABLE_CHECKS"),
            std_includes=not _env_flag("ENUMHELPERS_NO_STD_INCLUDES"),
        )


# Global configuration instance
CONFIG = EnumHelpersConfig.from_env()


def configure(**overrides: Any) -> EnumHelpersConfig:
    """Update the global configuration in place.

    Args:
        **overrides: Field names of `EnumHelpersConfig` and their new values.

    Returns:
        The global configuration instance.

    Raises:
        TypeError: If an override does not name a configuration field.
    """
    valid = {f.name for f in fields(EnumHelpersConfig)}
    unknown = sorted(set(overrides) - valid)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(unknown)}")
    for name, value in overrides.items():
        setattr(CONFIG, name, value)
    return CONFIG


def reset_config() -> EnumHelpersConfig:
    """Restore the global configuration to its environment defaults (mainly for testing)."""
    defaults = EnumHelpersConfig.from_env()
    for f in fields(EnumHelpersConfig):
        setattr(CONFIG, f.name, getattr(defaults, f.name))
    return CONFIG

"""Sensitive argument detection.

Provides:
  - ``SensitiveArgumentDetector``: frozen dataclass bound to a pattern set.
  - ``contains_sensitive_arguments()``: check against the default pattern set.
  - ``arguments_contain_sensitive_information()``: deprecated alias.

INVARIANTS:
  - Pure and synchronous. No I/O, no shared mutable state; safe from any thread.
  - NEVER raises for ``None`` or ``str`` input. ``None`` and ``""`` are not sensitive.
  - Plain case-sensitive substring matching. This is naive on purpose: it can
    flag "push " inside an unrelated token and it misses flags spelled in ways
    the pattern list does not cover. Switching to token or regex matching would
    change which command lines are suppressed, so it stays as is.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Optional

from argguard.constants import SENSITIVE_ARGUMENT_PATTERNS


@dataclass(frozen=True)
class SensitiveArgumentDetector:
    """Decides whether a raw argument string may contain secrets.

    Fields:
        patterns: Substrings that mark an argument string as sensitive.
                  Defaults to ``SENSITIVE_ARGUMENT_PATTERNS``.
    """

    patterns: tuple[str, ...] = SENSITIVE_ARGUMENT_PATTERNS

    def __post_init__(self) -> None:
        if not self.patterns:
            raise ValueError("SensitiveArgumentDetector requires at least one pattern")
        if any(not p for p in self.patterns):
            raise ValueError("Empty pattern would match every argument string")

    def contains_sensitive_arguments(self, command_arguments: Optional[str]) -> bool:
        """Return True if ``command_arguments`` contains any sensitive pattern.

        The result says nothing about which pattern matched.

        Args:
            command_arguments: Raw, unparsed argument string. May be None.

        Returns:
            False for None, empty, or pattern-free input; True otherwise.
        """
        if not command_arguments:
            return False
        return any(pattern in command_arguments for pattern in self.patterns)


#: Process-wide detector over the fixed pattern set.
DEFAULT_DETECTOR = SensitiveArgumentDetector()


def contains_sensitive_arguments(command_arguments: Optional[str]) -> bool:
    """Check ``command_arguments`` against ``SENSITIVE_ARGUMENT_PATTERNS``."""
    return DEFAULT_DETECTOR.contains_sensitive_arguments(command_arguments)


def arguments_contain_sensitive_information(command_arguments: Optional[str]) -> bool:
    """Deprecated alias of ``contains_sensitive_arguments()``."""
    warnings.warn(
        "arguments_contain_sensitive_information() is deprecated; "
        "use contains_sensitive_arguments() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return contains_sensitive_arguments(command_arguments)

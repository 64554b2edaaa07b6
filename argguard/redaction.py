"""Log-side helpers built on the detector.

A flagged command line is suppressed as a whole. Partial redaction is never
attempted because the detector does not know where the secret value sits.
"""

from __future__ import annotations

from typing import Any, Optional

from argguard.constants import SENSITIVE_ARGUMENTS_MESSAGE
from argguard.detector import contains_sensitive_arguments

#: Event dict key inspected by ``scrub_command_line``.
COMMAND_LINE_KEY = "command_line"


def loggable_command_line(
    command_arguments: Optional[str],
    message: str = SENSITIVE_ARGUMENTS_MESSAGE,
) -> str:
    """Return the form of ``command_arguments`` that is safe to log.

    Args:
        command_arguments: Raw argument string (None is treated as empty).
        message:           Replacement text for a flagged command line.

    Returns:
        ``command_arguments`` unchanged (``""`` for None) when clean, else ``message``.
    """
    if contains_sensitive_arguments(command_arguments):
        return message
    return command_arguments or ""


class CommandLineScrubber:
    """structlog processor: suppress a sensitive ``command_line`` field.

    Must run before any renderer. Non-string values pass through.

    Args:
        message: Replacement text written in place of a flagged command line.
    """

    def __init__(self, message: str = SENSITIVE_ARGUMENTS_MESSAGE) -> None:
        self.message = message

    def __call__(self, logger: Any, method_name: str, event_dict: dict) -> dict:
        value = event_dict.get(COMMAND_LINE_KEY)
        if isinstance(value, str) and contains_sensitive_arguments(value):
            event_dict[COMMAND_LINE_KEY] = self.message
            event_dict["command_line_suppressed"] = True
        return event_dict


#: Scrubber using the default suppression message.
scrub_command_line = CommandLineScrubber()

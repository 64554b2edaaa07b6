"""argguard — sensitive command-line argument detection.

Decides whether a raw command-line argument string may carry secrets
(passwords, API keys, user names) before a host application logs it.

Public API:
  - ``contains_sensitive_arguments()`` — the detection check
  - ``SensitiveArgumentDetector``      — detector bound to a pattern set
  - ``loggable_command_line()``        — the string a host should actually log
"""

from argguard.constants import SENSITIVE_ARGUMENT_PATTERNS, SENSITIVE_ARGUMENTS_MESSAGE
from argguard.detector import (
    SensitiveArgumentDetector,
    arguments_contain_sensitive_information,
    contains_sensitive_arguments,
)
from argguard.redaction import loggable_command_line

__version__ = "1.0.0"

__all__ = [
    "SENSITIVE_ARGUMENT_PATTERNS",
    "SENSITIVE_ARGUMENTS_MESSAGE",
    "SensitiveArgumentDetector",
    "arguments_contain_sensitive_information",
    "contains_sensitive_arguments",
    "loggable_command_line",
]

"""Shared constants for argguard.

The sensitive pattern set lives here and nowhere else. It is fixed at import
time and is deliberately not exposed through the config file.
"""

# ─── Sensitive argument patterns ─────────────────────────────────────────────

# Case-sensitive substrings whose presence marks an argument string as possibly
# secret-bearing. A leading single '-' also matches the '--' long form.
# Separators are part of the literal: "-p" alone does not match, "-p " and
# "-p=" do.
SENSITIVE_ARGUMENT_PATTERNS: tuple[str, ...] = (
    "-install-arguments-sensitive",
    "-package-parameters-sensitive",
    "apikey ",
    "config ",
    "push ",  # bare "push" with no parameters is fine to log
    "-p ",
    "-p=",
    "-password",
    "-cp ",
    "-cp=",
    "-certpassword",
    "-k ",
    "-k=",
    "-key ",
    "-key=",
    "-apikey",
    "-api-key",
    "-u ",
    "-u=",
    "-user ",
    "-user=",
)

# ─── Log suppression ─────────────────────────────────────────────────────────

# Logged in place of a command line that was flagged as sensitive.
SENSITIVE_ARGUMENTS_MESSAGE: str = (
    "Command line not shown - sensitive arguments may have been passed."
)

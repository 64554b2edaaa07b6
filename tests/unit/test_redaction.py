"""Tests for loggable_command_line() and the scrub_command_line processor."""

from __future__ import annotations

from argguard.constants import SENSITIVE_ARGUMENTS_MESSAGE
from argguard.redaction import (
    COMMAND_LINE_KEY,
    CommandLineScrubber,
    loggable_command_line,
    scrub_command_line,
)


class TestLoggableCommandLine:
    def test_clean_passes_through_unchanged(self) -> None:
        line = "install mypackage -version 1.0.0"
        assert loggable_command_line(line) == line

    def test_sensitive_is_replaced_whole(self) -> None:
        out = loggable_command_line("install mypackage --password hunter2")
        assert out == SENSITIVE_ARGUMENTS_MESSAGE
        assert "hunter2" not in out

    def test_none_becomes_empty_string(self) -> None:
        assert loggable_command_line(None) == ""

    def test_empty_stays_empty(self) -> None:
        assert loggable_command_line("") == ""

    def test_custom_message(self) -> None:
        assert loggable_command_line("push mypackage", message="[hidden]") == "[hidden]"


class TestScrubCommandLine:
    def test_sensitive_value_replaced(self) -> None:
        event = {"event": "running", COMMAND_LINE_KEY: "apikey ABC123"}
        out = scrub_command_line(None, "info", event)
        assert out[COMMAND_LINE_KEY] == SENSITIVE_ARGUMENTS_MESSAGE
        assert out["command_line_suppressed"] is True

    def test_clean_value_untouched(self) -> None:
        event = {"event": "running", COMMAND_LINE_KEY: "list --local-only"}
        out = scrub_command_line(None, "info", event)
        assert out[COMMAND_LINE_KEY] == "list --local-only"
        assert "command_line_suppressed" not in out

    def test_missing_key_untouched(self) -> None:
        event = {"event": "started"}
        assert scrub_command_line(None, "info", event) == {"event": "started"}

    def test_non_string_value_untouched(self) -> None:
        event = {"event": "running", COMMAND_LINE_KEY: ["push", "mypackage"]}
        out = scrub_command_line(None, "info", event)
        assert out[COMMAND_LINE_KEY] == ["push", "mypackage"]

    def test_other_fields_not_inspected(self) -> None:
        event = {"event": "push mypackage", "detail": "-p hunter2"}
        assert scrub_command_line(None, "info", dict(event)) == event

    def test_custom_message(self) -> None:
        scrubber = CommandLineScrubber("[hidden]")
        out = scrubber(None, "info", {"event": "running", COMMAND_LINE_KEY: "-p hunter2"})
        assert out[COMMAND_LINE_KEY] == "[hidden]"

    def test_default_instance_uses_default_message(self) -> None:
        assert scrub_command_line.message == SENSITIVE_ARGUMENTS_MESSAGE

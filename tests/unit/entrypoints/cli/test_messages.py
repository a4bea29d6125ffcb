"""Unit tests for :mod:`service_bootstrap.entrypoints.cli.helpers.messages`.

This suite verifies that glyph selection follows the *current* stderr encoding,
that ``warn``/``success``/``error`` emit styled lines to stderr only, and that
bootstrap errors are reported together with their cause chain.
"""

import io
import sys

import click
import pytest

from service_bootstrap.entrypoints.cli.helpers.messages import (
    _supports_character,
    error,
    glyph,
    report_bootstrap_error,
    success,
    warn,
)
from service_bootstrap.service_layer.errors import (
    BootstrapFailed,
    InvalidServiceInterface,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that mimics a TTY with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", {"caution": "[!]", "success": "[OK]", "error": "[X]"}),
        ("utf-8", {"caution": "⚠️", "success": "✅", "error": "❌"}),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Glyphs fall back to ASCII when stderr cannot encode the emoji."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    assert {kind: glyph(kind) for kind in expected} == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stderr stream is looked up again on every probe."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True


@pytest.mark.parametrize(
    ("encoding", "expected_glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(
    monkeypatch, encoding, expected_glyph, color_code, func
):
    """warn/success/error write bold, colored lines to stderr with the right glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("careful!")

    out = stream.getvalue()
    assert expected_glyph in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_warn_writes_to_stderr_only(monkeypatch, capsys):
    """warn writes to stderr and leaves stdout untouched."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    warn("careful!")
    captured = capsys.readouterr()
    assert "careful!" in captured.err
    assert captured.out == ""


def test_report_bootstrap_error_prints_cause_chain(monkeypatch, capsys):
    """The error's code, message and each cause appear on stderr."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("ascii"))
    failure = BootstrapFailed("mailer")
    failure.__cause__ = InvalidServiceInterface("mailer")

    report_bootstrap_error(failure)

    err = capsys.readouterr().err
    lines = err.splitlines()
    assert lines[0].endswith(
        '[E_BOOTSTRAP] Could not fulfill the bootstrap process for "mailer"'
    )
    assert lines[1] == (
        "  caused by [E_BOOTSTRAP_INVALID_SERVICE_INTERFACE] "
        'Expecting the service "mailer" to have a "bootstrap" method'
    )


def test_report_bootstrap_error_labels_plain_causes(monkeypatch, capsys):
    """Causes without a code are labelled with their type name."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("ascii"))
    failure = BootstrapFailed("mailer")
    failure.__cause__ = RuntimeError("smtp unreachable")

    report_bootstrap_error(failure)

    assert "  caused by RuntimeError: smtp unreachable" in capsys.readouterr().err

"""Terminal message helpers for the service-bootstrap CLI.

User-visible lines go to **stderr** so stdout stays free for the plan output.
Glyphs fall back to ASCII when the stderr encoding cannot represent them.
"""

import click

from service_bootstrap.service_layer.errors import iter_causes

GLYPHS = {
    "caution": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a redirected stderr is honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji for ``kind`` ("caution", "success", "error") or its ASCII fallback."""
    emoji, fallback = GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph('caution')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Bootstrapped 3 services.``
    """
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Could not bootstrap "mailer".``
    """
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)


def report_bootstrap_error(exc: BaseException) -> None:
    """Emit ``exc`` and its whole ``__cause__`` chain to stderr.

    The first line is the error itself (with its ``code`` when it has one);
    each cause follows on its own indented line.
    """
    for depth, cause in enumerate(iter_causes(exc)):
        code = getattr(cause, "code", None)
        label = f"[{code}] " if code else f"{type(cause).__name__}: "
        if depth == 0:
            error(f"{label}{cause}")
        else:
            click.echo(f"{'  ' * depth}caused by {label}{cause}", err=True)

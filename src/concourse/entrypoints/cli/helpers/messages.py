"""Terminal message helpers for the CONCOURSE CLI.

Status lines go to stderr so stdout stays machine-readable; each line gets a
glyph, with an ASCII fallback on terminals that cannot encode emoji.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Return the emoji of an ``(emoji, fallback)`` pair if stderr can show it."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def _emit(pair: tuple[str, str], msg: str, color: str) -> None:
    click.secho(f"{glyph(pair)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow warning line to stderr, e.g. ``⚠️  Seat 1A is taken.``"""
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green success line to stderr, e.g. ``✅  No boundary violations.``"""
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red error line to stderr, e.g. ``❌  'seat' must not import 'baggage'.``"""
    _emit(FAILURE, msg, "red")

"""Terminal message helpers for the CATDOC CLI.

Verification findings are rendered one per line with a leading glyph. Glyphs
fall back to ASCII when stderr cannot encode them, and everything goes to
stderr so stdout stays free for ``--json`` output.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr stream.

    The stream is looked up on every call so that tests (and Click's runner)
    swapping stderr are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair if stderr can show it.

    Args:
        pair: One of `CAUTION`, `SUCCESS` or `FAILURE`.

    Returns:
        str: The emoji, or its ASCII fallback.
    """
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def _emit(pair: tuple[str, str], msg: str, color: str) -> None:
    click.secho(f"{glyph(pair)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  [cat] Missing composition: g∘f (A → C)``
    """
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Knowledge graph is valid.``
    """
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  [cat] Object 'A' lacks an identity morphism (id: A → A)``
    """
    _emit(FAILURE, msg, "red")

"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello Maven World!"

# Code points treated as blank by trim(): space and every control below it.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Provide a deterministic success path that the documentation, smoke
    tests, and packaging checks can rely on.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello Maven World!'
    """
    return CANONICAL_GREETING


def trim(text: str) -> str:
    r"""Strip leading and trailing whitespace and control characters.

    Example:
        >>> trim("  maven tutorial  ")
        'maven tutorial'
        >>> trim("\t\x00abc\n")
        'abc'
    """
    return text.strip(_TRIM_CHARS)


def capitalize(text: str) -> str:
    """Title-case the first character, leaving the rest untouched.

    Unlike :meth:`str.capitalize`, the remaining characters keep their case.
    A first character whose title case is longer than one character (``ß``,
    ligatures such as ``ﬁ``) is kept as-is so the length never changes.

    Example:
        >>> capitalize("maven tutorial")
        'Maven tutorial'
        >>> capitalize("mAVEN")
        'MAVEN'
        >>> capitalize("ßtraße")
        'ßtraße'
        >>> capitalize("")
        ''
    """
    if not text:
        return text
    first = text[0].title()
    if len(first) != 1:
        return text
    return first + text[1:]


def clean_message(text: str) -> str:
    """Trim *text* and capitalize its first letter.

    Example:
        >>> clean_message("  maven tutorial  ")
        'Maven tutorial'
    """
    return capitalize(trim(text))


def format_operation(left: int, symbol: str, right: int, result: int) -> str:
    """Render a binary operation as ``"<left> <symbol> <right> = <result>"``.

    Example:
        >>> format_operation(5, "+", 3, 8)
        '5 + 3 = 8'
    """
    return f"{left} {symbol} {right} = {result}"


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "capitalize",
    "clean_message",
    "format_operation",
    "trim",
]

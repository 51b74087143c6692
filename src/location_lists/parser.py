import re

from .errors import FormatError, ParseError
from .tokenizer import tokenize

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"invalid literal for int() with base 10: {token!r}")
    return int(token, 10)


def parse_line(line: str, line_number: int | None = None) -> tuple[int, int]:
    """
    Parse one input line into its (left, right) pair of location ids.

    Args:
        line (str): Raw text of the line; surrounding whitespace is ignored.
        line_number (int | None): 1-based position in the file, used in error messages.

    Returns:
        tuple[int, int]: The first token as the left value, the second as the right value.

    Raises:
        FormatError: If the line does not hold exactly two tokens.
        ParseError: If either token is not a base-10 integer.
    """
    tokens = tokenize(line)
    if len(tokens) != 2:
        where = f" (line {line_number})" if line_number is not None else ""
        raise FormatError(f"expected two entries per line, found {len(tokens)}{where}")

    first, second = tokens
    try:
        return _to_int(first), _to_int(second)
    except ValueError as e:
        raise ParseError(first, second, e, line_number) from e

import re
from functools import lru_cache

WHITESPACE = r"\s+"


@lru_cache(maxsize=None)
def _compile(separator: str) -> re.Pattern:
    return re.compile(separator)


def tokenize(line: str, separator: str = WHITESPACE) -> list[str]:
    """
    Split `line` on every run matched by `separator` and return the
    non-empty pieces in order. An empty line gives an empty list.
    """
    if not line:
        return []
    return [token for token in _compile(separator).split(line) if token]

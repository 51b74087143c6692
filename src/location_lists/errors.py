class LocationListsError(Exception):
    """Base class for every error raised while loading or reducing location lists."""


class NotFoundError(LocationListsError, FileNotFoundError):
    pass


class InputIOError(LocationListsError, OSError):
    pass


class FormatError(LocationListsError, ValueError):
    """A line did not hold exactly two entries."""


class ParseError(LocationListsError, ValueError):
    """One of the two entries on a line is not a base-10 integer."""

    def __init__(self, first: str, second: str, reason: Exception, line_number: int | None = None):
        self.tokens = (first, second)
        self.reason = reason
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Cannot convert either '{first}' or '{second}' string to integer{where}. "
            f"Exception: {reason}"
        )


class LengthMismatchError(LocationListsError, ValueError):
    def __init__(self, left_len: int, right_len: int):
        self.left_len = left_len
        self.right_len = right_len
        super().__init__(
            "left and right location lists are expected to have the same size, "
            f"but left has {left_len} elements and right has {right_len} elements"
        )


class SelfCheckError(LocationListsError, AssertionError):
    pass

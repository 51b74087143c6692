from pathlib import Path
from loguru import logger

from .errors import FormatError, InputIOError, NotFoundError, ParseError
from .models import Locations
from .parser import parse_line


def load_locations(path: str | Path) -> Locations:
    """
    Read a two-column file of location ids into left and right lists.

    Blank lines at the end of the file are skipped; a blank line followed
    by more records is a format error. Any error aborts the whole load.

    Args:
        path (str | Path): File holding two whitespace-separated integers per line.

    Returns:
        Locations: The left and right columns, in file order.

    Raises:
        NotFoundError: If `path` does not exist.
        InputIOError: If the file cannot be opened or read.
        FormatError: If a line does not hold exactly two entries.
        ParseError: If an entry is not a base-10 integer.
    """
    path = Path(path)
    if not path.exists():
        logger.error(f"Could not find locations file at {path}")
        raise NotFoundError(f"file {path} does not exist")

    logger.debug(f"Loading locations from {path}")
    left: list[int] = []
    right: list[int] = []
    pending_blank: int | None = None

    try:
        with path.open("r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    if pending_blank is None:
                        pending_blank = line_number
                    continue
                if pending_blank is not None:
                    logger.error(f"Blank line {pending_blank} in {path} is followed by more records")
                    raise FormatError(f"expected two entries per line, found 0 (line {pending_blank})")

                try:
                    first, second = parse_line(line, line_number)
                except (FormatError, ParseError) as e:
                    logger.error(f"Bad record in {path}: {e}")
                    raise
                left.append(first)
                right.append(second)
    except FileNotFoundError as e:
        logger.error(f"Locations file {path} disappeared before it could be read")
        raise NotFoundError(f"file {path} does not exist") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read locations file {path}: {e}")
        raise InputIOError(f"cannot read file {path}: {e}") from e

    logger.info(f"Loaded {len(left)} location pairs from {path}")
    return Locations(left=left, right=right)

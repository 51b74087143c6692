from pathlib import Path

import pytest
from loguru import logger

from location_lists.config import Settings, InputSettings, SelfCheckSettings

EXAMPLE = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""


@pytest.fixture
def write_file(tmp_path):
    """
    Function-scoped: returns a helper that writes `text` to a file
    under tmp_path and hands back its path.
    """
    def _write(text: str, name: str = "locations.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def example_file(write_file) -> Path:
    return write_file(EXAMPLE, name="example.txt")


@pytest.fixture
def settings(example_file) -> Settings:
    """Settings whose real input is the example file and whose self-check uses the bundled fixture."""
    return Settings(
        input=InputSettings(path=example_file),
        self_check=SelfCheckSettings(
            enabled=True,
            fixture=Path("data/test.txt"),
            expected_distance_sum=11,
            expected_similarity_score=31,
        ),
    )


@pytest.fixture
def error_logs():
    """
    Function-scoped: collect every ERROR-level loguru message emitted
    during the test, then remove the sink again.
    """
    messages = []
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="ERROR")
    yield messages
    logger.remove(sink_id)

from loguru import logger
from pydantic import ValidationError

from .config import Settings, load_config
from .errors import LocationListsError, SelfCheckError
from .loader import load_locations
from .models import Report
from .reducers import distance_sum, similarity_score


def self_check(settings: Settings) -> None:
    """
    Run both reducers on the bundled example and compare against the known answers.

    Raises:
        SelfCheckError: If either result differs from its expected value.
    """
    check = settings.self_check
    fixture = check.fixture_path()
    logger.info(f"Running self-check against {fixture}")
    locations = load_locations(fixture)

    # Test part 1
    result = distance_sum(locations.left, locations.right)
    if result != check.expected_distance_sum:
        raise SelfCheckError(f"Error TEST 1! Expected {check.expected_distance_sum}, got {result}")

    # Test part 2
    result = similarity_score(locations.left, locations.right)
    if result != check.expected_similarity_score:
        raise SelfCheckError(f"Error TEST 2! Expected {check.expected_similarity_score}, got {result}")

    logger.info("Self-check passed")


def run(settings: Settings) -> Report:
    locations = load_locations(settings.input.path)
    return Report(
        distance_sum=distance_sum(locations.left, locations.right),
        similarity_score=similarity_score(locations.left, locations.right),
        rows=len(locations),
    )


def main() -> int:
    try:
        cfg = load_config()
        if cfg.self_check.enabled:
            self_check(cfg)
        else:
            logger.warning("Self-check disabled in configuration")
        report = run(cfg)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except LocationListsError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(f"The sum of distances is : {report.distance_sum}")
    print(f"The similarity score is : {report.similarity_score}")
    return 0

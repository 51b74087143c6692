from location_lists.config import PACKAGE_DIR, load_config


def test_loads_all_sections():
    cfg = load_config()
    assert cfg.input.path.name == "input.txt"
    assert cfg.self_check.enabled is True
    assert cfg.self_check.expected_distance_sum == 11
    assert cfg.self_check.expected_similarity_score == 31


def test_fixture_resolves_inside_package():
    cfg = load_config()
    fixture = cfg.self_check.fixture_path()
    assert fixture == PACKAGE_DIR / "data" / "test.txt"
    assert fixture.exists()


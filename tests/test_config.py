import pytest

from planar_kernel import (
    LineString,
    ValidationConfig,
    get_validation_config,
    is_valid,
    set_validation_config,
)


@pytest.fixture
def restore_config():
    saved = get_validation_config()
    yield
    set_validation_config(saved)


def test_defaults():
    config = get_validation_config()
    assert config.require_finite
    assert not config.allow_repeated_points


def test_get_returns_a_copy():
    config = get_validation_config()
    config.allow_repeated_points = True
    assert not get_validation_config().allow_repeated_points


def test_set_changes_default_validation(restore_config):
    line = LineString(((0, 0), (1, 0), (1, 0), (2, 0)))
    assert not is_valid(line)

    config = ValidationConfig(allow_repeated_points=True)
    set_validation_config(config)
    config.allow_repeated_points = False

    assert get_validation_config().allow_repeated_points
    assert is_valid(line)

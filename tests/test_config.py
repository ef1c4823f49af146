import json
import logging
import os

import pytest

import peptidescene
from peptidescene.config import (
    DEFAULT_GEOMETRY,
    DEFAULT_GEOMETRY_PATH,
    GeometryConfig,
    load_geometry,
)
from peptidescene.logging_config import LOG_LEVEL_ENV, resolve_level, setup_logging


def test_default_spacing():
    g = DEFAULT_GEOMETRY
    assert g.residue_spacing == pytest.approx(2 * (g.socket_length + g.residue_radius + g.ball_radius))


def test_rejects_non_positive_values():
    with pytest.raises(ValueError):
        GeometryConfig(residue_radius=0.0)
    with pytest.raises(ValueError):
        GeometryConfig(ball_radius=-1.0)


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError):
        GeometryConfig.from_dict({"residue_radius": 1.0, "colour": "red"})


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_GEOMETRY.ball_radius = 1.0


def test_load_geometry_partial_override(tmp_path):
    path = tmp_path / "geometry.json"
    path.write_text(json.dumps({"ball_radius": 0.5}), encoding="utf-8")

    config = load_geometry(str(path))
    assert config.ball_radius == 0.5
    assert config.residue_radius == DEFAULT_GEOMETRY.residue_radius


def test_load_geometry_requires_object(tmp_path):
    path = tmp_path / "geometry.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_geometry(str(path))


def test_shipped_defaults_live_inside_the_package():
    assert os.path.isfile(DEFAULT_GEOMETRY_PATH)
    assert os.path.samefile(os.path.dirname(os.path.dirname(DEFAULT_GEOMETRY_PATH)), os.path.dirname(peptidescene.__file__))


def test_shipped_defaults_match_constants():
    assert load_geometry() == DEFAULT_GEOMETRY


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("peptidescene")
    try:
        logger.debug("hello from test")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "hello from test" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize("value, expected", [
    ("", logging.INFO),
    ("debug", logging.DEBUG),
    (" WARNING ", logging.WARNING),
    ("5", 5),
])
def test_env_overrides_log_level(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert resolve_level(logging.INFO) == expected


def test_env_rejects_unknown_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    with pytest.raises(ValueError):
        resolve_level(logging.INFO)


def test_setup_logging_applies_env_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    logger = logging.getLogger("peptidescene")
    try:
        setup_logging(level=logging.DEBUG)
        assert logger.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in logger.handlers)
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

"""Tests for the command line entry point, configuration and logging setup."""

import importlib
import logging
import logging.handlers

import pytest

import config
import main
from geometry.world import WorldInfo
from logging_config import setup_logging


@pytest.fixture
def quiet_logging(monkeypatch):
    """Keep main() from reconfiguring the root logger during tests."""
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


class TestScenes:
    @pytest.mark.parametrize("name", sorted(main.SCENES))
    def test_every_scene_builds(self, name):
        world_info, viewer = main.build_world(name, 32, 24)
        assert isinstance(world_info, WorldInfo)
        assert len(world_info.root_object) > 0
        assert len(world_info.lights) > 0
        assert hasattr(viewer, "ray_for_pos")

    def test_limits_come_from_arguments(self):
        world_info, _ = main.build_world("sphere", 8, 8, max_light_bounces=2)
        assert world_info.limits.max_light_bounces == 2

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            main.build_world("teapot", 8, 8)

    def test_quality_scales_resolution(self):
        assert main.scaled_size(100, 50, "interactive") == (50, 25)
        assert main.scaled_size(100, 50, "high_quality") == (100, 50)
        assert main.scaled_size(10, 10, "interactive") == (8, 8)


class TestCommandLine:
    def test_renders_to_requested_file(self, tmp_path, quiet_logging):
        output = tmp_path / "sphere.ppm"
        code = main.main(["--scene", "sphere", "--width", "12", "--height", "12",
                          "--workers", "2", "-o", str(output)])
        assert code == 0
        assert output.read_bytes().startswith(b"P3\n12 12\n255\n")

    def test_tone_map_option(self, tmp_path, quiet_logging):
        output = tmp_path / "checker.png"
        code = main.main(["--scene", "checker", "--width", "10", "--height", "10",
                          "--tone-map", "reinhard", "-o", str(output)])
        assert code == 0
        assert output.exists()

    def test_failure_exits_non_zero(self, tmp_path, quiet_logging):
        code = main.main(["--scene", "sphere", "--width", "8", "--height", "8",
                          "-o", str(tmp_path / "image.gif")])
        assert code == 1

    def test_rejects_unknown_scene(self):
        with pytest.raises(SystemExit):
            main.parse_args(["--scene", "teapot"])


class TestConfig:
    def test_quality_levels(self):
        assert set(config.QUALITY_LEVELS) == {"interactive", "balanced", "high_quality"}
        assert config.QUALITY_LEVELS[config.RENDER_QUALITY]["scale"] > 0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RENDER_WIDTH", "64")
        monkeypatch.setenv("RENDER_WORKERS", "3")
        try:
            importlib.reload(config)
            assert config.RENDER_WIDTH == 64
            assert config.RENDER_WORKERS == 3
        finally:
            monkeypatch.delenv("RENDER_WIDTH")
            monkeypatch.delenv("RENDER_WORKERS")
            importlib.reload(config)


class TestLoggingConfig:
    def test_console_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging("raytracer-test", "DEBUG", log_file)
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)

            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        logger = setup_logging("raytracer-test-repeat", "WARNING")
        try:
            setup_logging("raytracer-test-repeat", "WARNING")
            assert len(logger.handlers) == 1
            assert logger.level == logging.WARNING
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

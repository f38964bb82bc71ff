"""Tests for ProcessingConfig and ConfigManager."""

import json

import pytest

from picross.config_manager import ConfigManager
from picross.models import BoardPolicy, ProcessingConfig


class TestProcessingConfig:
    def test_defaults(self):
        config = ProcessingConfig()
        assert config.board_size == 16
        assert config.color_threshold == 80
        assert config.alpha_threshold == 128
        assert config.color_mode is False
        assert config.board_policy == BoardPolicy.SILHOUETTE

    def test_from_dict_camel_case(self):
        config = ProcessingConfig.from_dict(
            {"boardSize": 8, "colorMode": True, "alphaThreshold": 10}
        )
        assert (config.board_size, config.color_mode, config.alpha_threshold) == (8, True, 10)
        assert config.color_threshold == 80

    def test_from_dict_snake_case_and_unknown_keys(self):
        config = ProcessingConfig.from_dict(
            {"color_threshold": 20, "board_policy": "outline", "extra": 1}
        )
        assert config.color_threshold == 20
        assert config.board_policy == BoardPolicy.OUTLINE
        assert not hasattr(config, "extra")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"board_size": 0},
            {"board_size": 2.5},
            {"alpha_threshold": -1},
            {"color_threshold": -0.5},
            {"board_policy": "outline"},
            {"board_size": True},
            {"color_mode": "false"},
            {"color_mode": 1},
        ],
    )
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ValueError):
            ProcessingConfig(**kwargs).validate()


class TestConfigManager:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / "none.json").load()
        assert config == ProcessingConfig()

    def test_save_and_load(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        saved = ProcessingConfig(
            board_size=24, color_mode=True, board_policy=BoardPolicy.OUTLINE
        )
        assert manager.save(saved) == (True, None)

        data = json.loads((tmp_path / "config.json").read_text())
        assert data["board_policy"] == "outline"
        assert manager.load() == saved

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert ConfigManager(path).load() == ProcessingConfig()

    def test_invalid_values_give_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"board_size": -3}))
        assert ConfigManager(path).load() == ProcessingConfig()

    def test_string_color_mode_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"colorMode": "false", "boardSize": 8}))
        config = ConfigManager(path).load()
        assert config.color_mode is False
        assert config.board_size == 16

    def test_save_failure(self, tmp_path):
        success, error = ConfigManager(tmp_path / "missing" / "config.json").save(
            ProcessingConfig()
        )
        assert not success
        assert error

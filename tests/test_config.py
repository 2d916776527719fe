"""Tests for config loading."""

import pytest

from skillens.config import AppConfig, ServerConfig, UploadConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.server.cors_origins == ("*",)
        assert config.upload.max_bytes == 10 * 1024 * 1024

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "server:\n  port: 9000\n  cors_origins:\n    - http://localhost:3000\n"
        )
        config = load_config(yaml_path)
        assert config.server.port == 9000
        assert config.server.cors_origins == ("http://localhost:3000",)
        # Defaults for unspecified
        assert config.server.host == "127.0.0.1"
        assert config.upload.max_bytes == 10 * 1024 * 1024

    def test_load_config_from_env(self, tmp_path, monkeypatch):
        yaml_path = tmp_path / "custom.yaml"
        yaml_path.write_text("upload:\n  max_bytes: 1024\n")
        monkeypatch.setenv("SKILLENS_CONFIG", str(yaml_path))
        assert load_config().upload.max_bytes == 1024

    def test_empty_sections_use_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("server:\nupload:\n")
        assert load_config(yaml_path) == AppConfig()

    def test_single_origin_string(self):
        assert ServerConfig(cors_origins="http://a.test").cors_origins == ("http://a.test",)

    def test_frozen_config(self):
        config = ServerConfig()
        with pytest.raises(AttributeError):
            config.port = 1


class TestConfigValidation:
    @pytest.mark.parametrize("port", [0, 70000])
    def test_invalid_port(self, tmp_path, port):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text(f"server:\n  port: {port}\n")
        with pytest.raises(ValueError, match="port"):
            load_config(yaml)

    def test_invalid_max_bytes(self):
        with pytest.raises(ValueError, match="max_bytes"):
            UploadConfig(max_bytes=0)

    def test_unknown_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("upload:\n  max_size: 5\n")
        with pytest.raises(TypeError):
            load_config(yaml)

"""Unit tests for configuration (clean_scaffold.config)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from clean_scaffold.config import Config


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.dotnet_binary == "dotnet"
        assert config.dotnet_version == "9.0"
        assert config.solution_format is None
        assert config.command_timeout is None
        assert config.host_port == 8000
        assert config.container_port == 80
        assert config.verbose is False

    @pytest.mark.unit
    def test_images(self):
        config = Config()
        assert config.sdk_image == "mcr.microsoft.com/dotnet/sdk:9.0"
        assert config.runtime_image == "mcr.microsoft.com/dotnet/aspnet:9.0"

    @pytest.mark.unit
    def test_images_follow_version(self):
        config = Config(dotnet_version="8.0")
        assert config.sdk_image.endswith("sdk:8.0")
        assert config.runtime_image.endswith("aspnet:8.0")

    @pytest.mark.unit
    def test_solution_extension(self):
        assert Config().solution_extension == "sln"
        assert Config(solution_format="slnx").solution_extension == "slnx"

    @pytest.mark.unit
    def test_template_context(self):
        context = Config().template_context()
        assert context["host_port"] == 8000
        assert context["container_port"] == 80
        assert context["solution_extension"] == "sln"
        assert "sdk_image" in context and "runtime_image" in context


class TestConfigValidation:
    @pytest.mark.unit
    def test_invalid_solution_format(self):
        with pytest.raises(ValidationError):
            Config(solution_format="vcxproj")

    @pytest.mark.unit
    def test_timeout_below_minimum(self):
        with pytest.raises(ValidationError):
            Config(command_timeout=0)

    @pytest.mark.unit
    def test_port_out_of_range(self):
        with pytest.raises(ValidationError):
            Config(host_port=70000)

    @pytest.mark.unit
    def test_empty_binary(self):
        with pytest.raises(ValidationError):
            Config(dotnet_binary="")


class TestConfigFromEnv:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch):
        for var in (
            "SCAFFOLD_DOTNET",
            "SCAFFOLD_DOTNET_VERSION",
            "SCAFFOLD_SOLUTION_FORMAT",
            "SCAFFOLD_COMMAND_TIMEOUT",
            "SCAFFOLD_VERBOSE",
        ):
            monkeypatch.delenv(var, raising=False)

    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_reads_all_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SCAFFOLD_DOTNET", "/usr/share/dotnet/dotnet")
        monkeypatch.setenv("SCAFFOLD_DOTNET_VERSION", "8.0")
        monkeypatch.setenv("SCAFFOLD_SOLUTION_FORMAT", "SLNX")
        monkeypatch.setenv("SCAFFOLD_COMMAND_TIMEOUT", "300")
        monkeypatch.setenv("SCAFFOLD_VERBOSE", "true")

        config = Config.from_env()

        assert config.dotnet_binary == "/usr/share/dotnet/dotnet"
        assert config.dotnet_version == "8.0"
        assert config.solution_format == "slnx"
        assert config.command_timeout == 300
        assert config.verbose is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_verbose_off_values(self, monkeypatch: pytest.MonkeyPatch, value: str):
        monkeypatch.setenv("SCAFFOLD_VERBOSE", value)
        assert Config.from_env().verbose is False

    @pytest.mark.unit
    def test_bad_timeout(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SCAFFOLD_COMMAND_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            Config.from_env()

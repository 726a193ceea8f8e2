"""Tests for Config model validation and computed paths."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fifoctl.config import DEFAULT_DATA_DIR, Config, default_runtime_dir

RUNTIME_DIR = Path("/fake/run/fifoctl")
DATA_DIR = Path("/fake/data-dir")


@pytest.fixture
def cfg() -> Config:
    """Config with fixed directories."""
    return Config(runtime_dir=RUNTIME_DIR, data_dir=DATA_DIR)


class TestConfigPaths:
    """Computed path properties derive from runtime_dir and data_dir."""

    def test_command_pipe_path(self, cfg: Config) -> None:
        """Command pipe is runtime_dir / commands.pipe."""
        assert cfg.command_pipe_path == RUNTIME_DIR / "commands.pipe"

    def test_return_pipe_path(self, cfg: Config) -> None:
        """Return pipe is runtime_dir / return.pipe."""
        assert cfg.return_pipe_path == RUNTIME_DIR / "return.pipe"

    def test_config_path(self, cfg: Config) -> None:
        """Config file is data_dir / config.toml."""
        assert cfg.config_path == DATA_DIR / "config.toml"

    def test_log_path(self, cfg: Config) -> None:
        """Log file is data_dir / fifoctl.log."""
        assert cfg.log_path == DATA_DIR / "fifoctl.log"


class TestConfigValidation:
    """Pydantic field constraints."""

    def test_defaults(self, cfg: Config) -> None:
        """Default values for optional fields."""
        assert cfg.app_name == "fifoctl"
        assert cfg.reply_timeout_ms == 5000
        assert cfg.reply_timeout == 5.0

    def test_reply_timeout_below_minimum(self) -> None:
        """reply_timeout_ms < 1 is rejected."""
        with pytest.raises(ValidationError):
            Config(runtime_dir=RUNTIME_DIR, data_dir=DATA_DIR, reply_timeout_ms=0)

    def test_empty_app_name(self) -> None:
        """Empty app_name is rejected."""
        with pytest.raises(ValidationError):
            Config(runtime_dir=RUNTIME_DIR, data_dir=DATA_DIR, app_name="")

    def test_frozen(self, cfg: Config) -> None:
        """Config is immutable."""
        with pytest.raises(ValidationError):
            cfg.reply_timeout_ms = 10  # type: ignore[misc]


class TestRuntimeDir:
    """Default runtime directory resolution."""

    def test_xdg_runtime_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Runtime dir lives under $XDG_RUNTIME_DIR."""
        monkeypatch.setenv("XDG_RUNTIME_DIR", "/run/user/1000")
        assert default_runtime_dir("fifoctl") == Path("/run/user/1000/fifoctl")

    def test_fallback_without_xdg(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without $XDG_RUNTIME_DIR, a per-user directory in /tmp is used."""
        monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
        assert default_runtime_dir("fifoctl").name.startswith("fifoctl-")
        assert default_runtime_dir("fifoctl").parent == Path("/tmp")


class TestConfigBuild:
    """Config.build merges defaults, config.toml and overrides."""

    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without config.toml, defaults apply."""
        monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "run"))
        cfg = Config.build(data_dir=tmp_path)
        assert cfg.runtime_dir == tmp_path / "run" / "fifoctl"
        assert cfg.reply_timeout_ms == 5000

    def test_default_data_dir(self, tmp_path: Path) -> None:
        """Without override, the default data dir is used."""
        cfg = Config.build(runtime_dir=tmp_path)
        assert cfg.data_dir == DEFAULT_DATA_DIR

    def test_toml_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """config.toml sets app_name and reply_timeout_ms."""
        monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "run"))
        (tmp_path / "config.toml").write_text('app_name = "leftwm"\nreply_timeout_ms = 250\n')
        cfg = Config.build(data_dir=tmp_path)
        assert cfg.app_name == "leftwm"
        assert cfg.runtime_dir == tmp_path / "run" / "leftwm"
        assert cfg.reply_timeout_ms == 250

    def test_toml_wrong_types_ignored(self, tmp_path: Path) -> None:
        """Values of the wrong type in config.toml are ignored."""
        (tmp_path / "config.toml").write_text('app_name = 5\nreply_timeout_ms = "fast"\n')
        cfg = Config.build(runtime_dir=tmp_path / "run", data_dir=tmp_path)
        assert cfg.app_name == "fifoctl"
        assert cfg.reply_timeout_ms == 5000

    def test_runtime_dir_override(self, tmp_path: Path) -> None:
        """Explicit runtime_dir wins over the default."""
        cfg = Config.build(runtime_dir=tmp_path / "custom", data_dir=tmp_path)
        assert cfg.command_pipe_path == tmp_path / "custom" / "commands.pipe"

    def test_toml_boolean_timeout_ignored(self, tmp_path: Path) -> None:
        """A TOML boolean is not taken as a timeout."""
        (tmp_path / "config.toml").write_text("reply_timeout_ms = true\n")
        cfg = Config.build(runtime_dir=tmp_path / "run", data_dir=tmp_path)
        assert cfg.reply_timeout_ms == 5000

    def test_toml_log_level(self, tmp_path: Path) -> None:
        """log_level from config.toml is case-insensitive."""
        (tmp_path / "config.toml").write_text('log_level = "warning"\n')
        cfg = Config.build(runtime_dir=tmp_path / "run", data_dir=tmp_path)
        assert cfg.log_level == "WARNING"

    def test_toml_unknown_log_level(self, tmp_path: Path) -> None:
        """An unknown log level is rejected."""
        (tmp_path / "config.toml").write_text('log_level = "chatty"\n')
        with pytest.raises(ValidationError):
            Config.build(runtime_dir=tmp_path / "run", data_dir=tmp_path)

# topmark:header:start
#
#   project      : PipeConsole
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration loading, merging and freezing.

Layering (lowest to highest precedence): built-in defaults, the discovered
``pipeconsole.toml`` / ``pyproject.toml`` in the working directory, explicit
``--config`` files (in order), then CLI arguments.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pipeconsole.config import Config, ConfigError, MutableConfig
from pipeconsole.constants import DEFAULT_READ_COUNT
from pipeconsole.diagnostic.model import DiagnosticLevel


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_documented_values() -> None:
    """Defaults: 4096-byte reads, text mode, newline on, console encoding."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.read_count == DEFAULT_READ_COUNT == 4096
    assert cfg.as_byte_stream is False
    assert cfg.no_newline is False
    assert cfg.encoding is None
    assert cfg.diagnostics == ()


def test_from_toml_dict_reads_both_sections() -> None:
    """Known keys are mapped onto the draft."""
    draft = MutableConfig.from_toml_dict(
        {
            "reader": {"read_count": 16, "as_byte_stream": True},
            "writer": {"no_newline": True, "encoding": "UTF8"},
        }
    )
    cfg = draft.freeze()
    assert (cfg.read_count, cfg.as_byte_stream, cfg.no_newline) == (16, True, True)
    assert cfg.encoding == "utf-8"


def test_unknown_sections_and_keys_are_reported() -> None:
    """Unknown sections and keys become warnings, not errors."""
    draft = MutableConfig.from_toml_dict({"reader": {"bogus": 1}, "extra": {}})
    messages = [d.message for d in draft.diagnostics]
    assert any("reader.bogus" in str(m) for m in messages)
    assert any("[extra]" in str(m) for m in messages)
    assert all(d.level is DiagnosticLevel.WARNING for d in draft.diagnostics)


def test_wrong_value_types_are_ignored_with_a_warning() -> None:
    """A mistyped value leaves the field unset and is reported."""
    draft = MutableConfig.from_toml_dict({"reader": {"read_count": "big"}})
    assert draft.read_count is None
    assert len(draft.diagnostics) == 1
    assert draft.freeze().read_count == DEFAULT_READ_COUNT


def test_freeze_rejects_non_positive_read_count() -> None:
    """read_count must be positive."""
    with pytest.raises(ConfigError, match="read_count"):
        MutableConfig(read_count=0).freeze()


def test_freeze_rejects_unknown_encoding() -> None:
    """Unknown codecs are configuration errors."""
    with pytest.raises(ConfigError, match="Unknown encoding"):
        MutableConfig(encoding="klingon").freeze()


def test_from_toml_file_pyproject_uses_tool_table(tmp_path: Path) -> None:
    """pyproject.toml contributes only its [tool.pipeconsole] table."""
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.pipeconsole.writer]\nno_newline = true\n',
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.no_newline is True
    assert draft.config_files == [path]


def test_from_toml_file_pyproject_without_table(tmp_path: Path) -> None:
    """A pyproject.toml without our table is skipped."""
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableConfig.from_toml_file(path) is None


def test_from_toml_file_invalid_toml(tmp_path: Path) -> None:
    """Malformed TOML is a ConfigError."""
    path = _write(tmp_path / "pipeconsole.toml", "[reader\nread_count = 1\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        MutableConfig.from_toml_file(path)


def test_discovery_prefers_pipeconsole_toml(tmp_path: Path) -> None:
    """pipeconsole.toml wins over pyproject.toml in the same directory."""
    _write(tmp_path / "pyproject.toml", "[tool.pipeconsole.reader]\nread_count = 1\n")
    own = _write(tmp_path / "pipeconsole.toml", "[reader]\nread_count = 2\n")
    assert MutableConfig.discover_local_config_file(tmp_path) == own
    assert MutableConfig.load_merged(start=tmp_path).freeze().read_count == 2


def test_load_merged_precedence(tmp_path: Path) -> None:
    """Explicit files override the discovered one, later files override earlier ones."""
    _write(tmp_path / "pipeconsole.toml", "[reader]\nread_count = 2\nas_byte_stream = true\n")
    first = _write(tmp_path / "a.toml", "[reader]\nread_count = 3\n")
    second = _write(tmp_path / "b.toml", "[reader]\nread_count = 5\n")
    cfg = MutableConfig.load_merged(start=tmp_path, extra_config_files=[first, second]).freeze()
    assert cfg.read_count == 5
    assert cfg.as_byte_stream is True
    assert len(cfg.config_files) == 3


def test_no_config_skips_discovery_only(tmp_path: Path) -> None:
    """--no-config ignores the local file but keeps explicit ones."""
    _write(tmp_path / "pipeconsole.toml", "[reader]\nread_count = 2\n")
    extra = _write(tmp_path / "x.toml", "[writer]\nno_newline = true\n")
    cfg = MutableConfig.load_merged(
        start=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()
    assert cfg.read_count == DEFAULT_READ_COUNT
    assert cfg.no_newline is True


def test_cli_args_override_files_and_none_is_ignored(tmp_path: Path) -> None:
    """Only non-None CLI values override the merged draft."""
    _write(tmp_path / "pipeconsole.toml", "[writer]\nno_newline = true\nencoding = 'latin-1'\n")
    draft = MutableConfig.load_merged(start=tmp_path)
    draft.apply_cli_args({"no_newline": None, "encoding": "utf-8", "read_count": 8})
    cfg = draft.freeze()
    assert cfg.no_newline is True
    assert cfg.encoding == "utf-8"
    assert cfg.read_count == 8


def test_thaw_round_trip() -> None:
    """thaw() returns an editable copy; the frozen snapshot stays unchanged."""
    cfg = MutableConfig.from_defaults().freeze()
    draft = cfg.thaw()
    draft.no_newline = True
    assert draft.freeze().no_newline is True
    assert cfg.no_newline is False
    with pytest.raises(AttributeError):
        cfg.no_newline = True  # type: ignore[misc]

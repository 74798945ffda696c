# topmark:header:start
#
#   project      : PipeConsole
#   file         : model.py
#   file_relpath : src/pipeconsole/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for the console reader and writer.

`MutableConfig` collects settings from defaults, TOML files and CLI overrides and is
frozen into an immutable `Config` for a single invocation. Layering follows a
last-wins policy:

    defaults < discovered project file < explicit ``--config`` files < CLI options

TOML schema::

    [reader]
    read_count = 4096
    as_byte_stream = false

    [writer]
    no_newline = false
    encoding = "utf-8"   # optional; selects the explicit-encoding raw path
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pipeconsole.config.io import (
    ConfigError,
    TomlTable,
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
)
from pipeconsole.config.keys import Toml
from pipeconsole.config.logging import PipeconsoleLogger, get_logger
from pipeconsole.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_READ_COUNT,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)
from pipeconsole.core.encoding import resolve_encoding
from pipeconsole.diagnostic.model import DiagnosticLog, DiagnosticRecord

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: PipeconsoleLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one reader/writer invocation.

    Attributes:
        read_count (int): Reader buffer length in binary mode (positive).
        as_byte_stream (bool): Whether the reader reads raw bytes instead of lines.
        no_newline (bool): Whether the writer omits the newline after text values.
        encoding (str | None): Canonical codec name for the writer's explicit-encoding
            path, or ``None`` for the platform console encoding.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[DiagnosticRecord, ...]): Problems found while loading.
    """

    read_count: int
    as_byte_stream: bool
    no_newline: bool
    encoding: str | None
    config_files: tuple[Path, ...]
    diagnostics: tuple[DiagnosticRecord, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            read_count=self.read_count,
            as_byte_stream=self.as_byte_stream,
            no_newline=self.no_newline,
            encoding=self.encoding,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left at ``None`` are "unset" and inherit from the layer below when merged;
    `freeze` substitutes the built-in defaults for anything still unset.
    """

    read_count: int | None = None
    as_byte_stream: bool | None = None
    no_newline: bool | None = None
    encoding: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Validate and freeze this builder into an immutable `Config`.

        Raises:
            ConfigError: If ``read_count`` is not positive or ``encoding`` is unknown.
        """
        read_count: int = DEFAULT_READ_COUNT if self.read_count is None else self.read_count
        if read_count <= 0:
            raise ConfigError(f"read_count must be a positive integer, got {read_count}")

        encoding: str | None = None
        if self.encoding:
            try:
                encoding = resolve_encoding(self.encoding)
            except LookupError as e:
                raise ConfigError(f"Unknown encoding: {self.encoding!r}") from e

        return Config(
            read_count=read_count,
            as_byte_stream=bool(self.as_byte_stream),
            no_newline=bool(self.no_newline),
            encoding=encoding,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            read_count=DEFAULT_READ_COUNT,
            as_byte_stream=False,
            no_newline=False,
            encoding=None,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed TOML mapping.

        Unknown sections and keys, as well as values of the wrong type, are reported
        as warnings in the draft's diagnostics and otherwise ignored.

        Args:
            data (TomlTable): The parsed TOML content (already unwrapped from
                ``[tool.pipeconsole]`` for ``pyproject.toml``).
            config_file (Path | None): Source file, used in diagnostic messages.

        Returns:
            MutableConfig: The draft; unset fields stay ``None``.
        """
        draft = cls()
        origin: str = str(config_file) if config_file else "<dict>"
        diagnostics = draft.diagnostics

        for section, value in data.items():
            known = Toml.KNOWN_KEYS.get(section)
            if known is None:
                diagnostics.add_warning(f"Unknown config section [{section}] in {origin}")
                continue
            if isinstance(value, dict):
                for key in value:
                    if key not in known:
                        diagnostics.add_warning(
                            f"Unknown config key '{section}.{key}' in {origin}"
                        )

        reader: TomlTable = get_table_value(data, Toml.SECTION_READER)
        draft.read_count = get_int_value_or_none_checked(
            reader, Toml.KEY_READ_COUNT, where=Toml.SECTION_READER, diagnostics=diagnostics
        )
        draft.as_byte_stream = get_bool_value_or_none_checked(
            reader, Toml.KEY_AS_BYTE_STREAM, where=Toml.SECTION_READER, diagnostics=diagnostics
        )

        writer: TomlTable = get_table_value(data, Toml.SECTION_WRITER)
        draft.no_newline = get_bool_value_or_none_checked(
            writer, Toml.KEY_NO_NEWLINE, where=Toml.SECTION_WRITER, diagnostics=diagnostics
        )
        draft.encoding = get_string_value_or_none_checked(
            writer, Toml.KEY_ENCODING, where=Toml.SECTION_WRITER, diagnostics=diagnostics
        )

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``pipeconsole.toml`` and ``pyproject.toml`` files; for the
        latter only the ``[tool.pipeconsole]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml``
            has no ``[tool.pipeconsole]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_section

        draft = cls.from_toml_dict(data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_file(cls, start: Path) -> Path | None:
        """Return ``pipeconsole.toml`` (preferred) or ``pyproject.toml`` in ``start``."""
        for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Return defaults merged with the discovered file and explicit files.

        Args:
            start (Path | None): Directory searched for a project config file;
                defaults to the current working directory.
            extra_config_files (list[Path] | None): Explicit files; later wins.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            local: Path | None = cls.discover_local_config_file(start or Path.cwd())
            if local is not None:
                mc = cls.from_toml_file(local)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        diagnostics = DiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            read_count=other.read_count if other.read_count is not None else self.read_count,
            as_byte_stream=other.as_byte_stream
            if other.as_byte_stream is not None
            else self.as_byte_stream,
            no_newline=other.no_newline if other.no_newline is not None else self.no_newline,
            encoding=other.encoding if other.encoding is not None else self.encoding,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft; boolean
        flags that were not given on the command line should be passed as ``None``.

        Args:
            args (ArgsLike): Mapping with any of ``read_count``, ``as_byte_stream``,
                ``no_newline`` and ``encoding``.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        for key in ("read_count", "as_byte_stream", "no_newline", "encoding"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)
        return self

# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PipeConsole.

Defines the `Config` snapshot and its `MutableConfig` builder, TOML loading via
`tomlkit`, and the logging setup shared by the whole package.
"""

from __future__ import annotations

from pipeconsole.config.io import ConfigError
from pipeconsole.config.model import ArgsLike, Config, MutableConfig

__all__ = ["ArgsLike", "Config", "ConfigError", "MutableConfig"]

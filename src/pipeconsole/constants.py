# topmark:header:start
#
#   project      : PipeConsole
#   file         : constants.py
#   file_relpath : src/pipeconsole/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PIPECONSOLE_VERSION: str = get_version("pipeconsole")

# Buffer length used by the reader in binary mode
DEFAULT_READ_COUNT: int = 4096

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "PIPECONSOLE_LOG_LEVEL"

# Project config file looked up in the working directory
CONFIG_FILE_NAME: str = "pipeconsole.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "pipeconsole"

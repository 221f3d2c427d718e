#!/usr/bin/env python3
"""
These are the flagparse specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import FlagParseError
from .config import ConfigError, InvalidConfigError, MissingConfigError
from .parse import MissingValueError, ParseError

# ##-- end 1st party imports

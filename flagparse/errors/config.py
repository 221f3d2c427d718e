#!/usr/bin/env python3
"""
Errors raised while loading parser configuration
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ConfigError",
"InvalidConfigError",
"MissingConfigError",

)
# ##-- end Generated Exports

from ._base import FlagParseError

class ConfigError(FlagParseError):
    """ A Failure occurred while loading configuration """
    general_msg = "flagparse Config Failure:"
    pass

class MissingConfigError(ConfigError):
    """ The config file has no flagparse table """
    general_msg = "Missing flagparse Config:"
    pass

class InvalidConfigError(ConfigError):
    """ The config file could not be read, or holds invalid values """
    general_msg = "Invalid flagparse Config:"
    pass

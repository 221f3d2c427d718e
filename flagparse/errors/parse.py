#!/usr/bin/env python3
"""
Errors raised while answering lookups against a token list
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
"MissingValueError",
"ParseError",

)
# ##-- end Generated Exports

from ._base import FlagParseError

class ParseError(FlagParseError):
    """ In the course of reading CLI input, a failure occurred. """
    general_msg = "flagparse CLI Parsing Failure:"
    pass

class MissingValueError(ParseError):
    """ A value flag was the final token, so has nothing to read. """
    general_msg = "Missing Value For Flag:"

    @property
    def flag(self) -> str:
        return self.args[1]

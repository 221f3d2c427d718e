#!/usr/bin/env python3
"""
Parser configuration: the token syntax and the missing value policy.

Defaults are packaged in `flagparse.__data/constants.toml`,
and can be overridden from a `[tool.flagparse]` table in a pyproject.toml,
or the root table of a flagparse.toml

"""
# ruff: noqa:
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl
# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv.structs.chainguard import ChainGuard
from pydantic import BaseModel, ValidationError, field_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from flagparse import _interface as API
from flagparse import errors

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from collections.abc import Mapping

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:

class ParserConfig(BaseModel, frozen=True):
    """ Describes the token syntax an ArgumentParser reads.

    long_prefix  : prepended to a key for the long form, eg: --key
    short_prefix : prepended to a short key, eg: -k
    item_open    : the character that opens a bracketed item
    item_close   : the character that closes a bracketed item
    strict       : raise MissingValueError when a value flag is the final token,
                   instead of treating the flag as absent
    """

    long_prefix   : str  = "--"
    short_prefix  : str  = "-"
    item_open     : str  = "["
    item_close    : str  = "]"
    strict        : bool = False

    @classmethod
    def build(cls, data:ChainGuard|Mapping) -> ParserConfig:
        try:
            return cls.model_validate(dict(data.items()))
        except ValidationError as err:
            raise errors.InvalidConfigError("Bad parser config values: %s", str(err)) from err

    @field_validator("long_prefix", "short_prefix")
    def validate_prefix(cls, val):
        if not bool(val):
            raise ValueError("Flag prefixes can not be empty")
        return val

    @field_validator("item_open", "item_close")
    def validate_bracket(cls, val):
        if len(val) != 1:
            raise ValueError("Item brackets must be a single character", val)
        return val

def default_data() -> ChainGuard:
    """ Load the packaged default constants """
    return ChainGuard.load(API.constants_file).remove_prefix(API.CONSTANT_PREFIX)

@ftz.cache
def default_config() -> ParserConfig:
    return ParserConfig.build(default_data())

def load_config(path:Maybe[pl.Path|str]=None) -> ParserConfig:
    """ Load a ParserConfig from a toml file.

    A pyproject.toml must have a [tool.flagparse] table,
    any other file is read from its root table.
    Anything not set in the file uses the packaged defaults.
    """
    match path:
        case None:
            return default_config()
        case str():
            path = pl.Path(path)
        case pl.Path():
            pass
        case x:
            raise TypeError("Config targets should be pathlib.Path's", x)

    if not path.is_file():
        raise errors.MissingConfigError("No config file found: %s", path)

    logging.debug("Loading flagparse config: %s", path)
    try:
        loaded = ChainGuard.load(path)
    except (OSError, ValueError) as err:
        raise errors.InvalidConfigError("Could not read config: %s", path) from err

    match path.name:
        case API.PYPROJ_TOML if loaded.on_fail(None).tool.flagparse() is None:
            raise errors.MissingConfigError("Pyproject has no flagparse config: %s", path)
        case API.PYPROJ_TOML:
            chopped = loaded.remove_prefix(API.TOOL_PREFIX)
        case _:
            chopped = loaded

    data = dict(default_data().items())
    data.update(chopped.items())
    logging.info("Loaded flagparse config from: %s", path)
    return ParserConfig.build(data)

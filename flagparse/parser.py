#!/usr/bin/env python3
"""
A minimal lookup parser over a raw argv.

    prog [item] --key value -k value --switch

Items are collected once, on construction.
Keys and switches are looked up against the raw tokens on demand.

"""
# ruff: noqa:
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
import sys
# ##-- end stdlib imports

# ##-- 1st party imports
from flagparse import errors
from flagparse.config import ParserConfig, default_config

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final
    from collections.abc import Sequence

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
INT_RE : Final[re.Pattern] = re.compile(r"\s*[+-]?[0-9]+\s*", flags=re.ASCII)

# Body:

class ArgumentParser:
    """
    Answers lookups against a list of raw cli tokens.

    get_string_argument : the token after --key, or -k
    get_int_argument    : as above, parsed as an int, or a default
    get_switch_argument : whether --name is present
    items               : every [bracketed] token, with the brackets removed

    Duplicated flags are not merged, the left-most occurrence is used.
    A value flag as the final token has no value:
    it is treated as absent, unless the config is strict,
    in which case a MissingValueError is raised.
    """
    _tokens  : tuple[str, ...]
    _items   : tuple[str, ...]
    _config  : ParserConfig

    def __init__(self, tokens:Maybe[Sequence[str]]=None, *, config:Maybe[ParserConfig]=None) -> None:
        match tokens:
            case None:
                tokens = sys.argv[1:]
            case str():
                raise TypeError("Tokens should be a sequence of strings, not a string", tokens)
            case _:
                pass

        match config:
            case None:
                self._config = default_config()
            case ParserConfig():
                self._config = config
            case x:
                raise TypeError("Config should be a ParserConfig", x)

        self._tokens = tuple(tokens)
        self._items  = tuple(self._strip_brackets(x) for x in self._tokens if self._is_item(x))
        logging.debug("Parsed %s tokens, found items: %s", len(self._tokens), self._items)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {list(self._tokens)}>"

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def items(self) -> tuple[str, ...]:
        """ The bracketed items, in the order they were passed """
        return self._items

    @property
    def config(self) -> ParserConfig:
        return self._config

    def _is_item(self, token:str) -> bool:
        return token.startswith(self._config.item_open) and token.endswith(self._config.item_close)

    def _strip_brackets(self, token:str) -> str:
        """ Removes *all* brackets, not just the outer pair: [[x]] -> x """
        brackets = (self._config.item_open, self._config.item_close)
        return "".join(x for x in token if x not in brackets)

    def _value_after(self, flag:str) -> Maybe[str]:
        """ Get the token following the first occurrence of the flag """
        try:
            index = self._tokens.index(flag)
        except ValueError:
            return None

        match self._tokens[index+1:index+2]:
            case (value,):
                return value
            case _ if self._config.strict:
                raise errors.MissingValueError("No value follows flag: %s", flag)
            case _:
                logging.debug("Flag has no following value: %s", flag)
                return None

    def get_string_argument(self, key:str, short_key:str) -> Maybe[str]:
        """ Get the value of --{key}, falling back to -{short_key}.
        Returns None if neither has a value
        """
        long_flag  = f"{self._config.long_prefix}{key}"
        short_flag = f"{self._config.short_prefix}{short_key}"
        match self._value_after(long_flag):
            case None:
                return self._value_after(short_flag)
            case value:
                return value

    def get_int_argument(self, key:str, short_key:str, default:int=0) -> int:
        """ as get_string_argument, parsed as a base 10 int.
        Returns the default when absent or unparseable
        """
        match self.get_string_argument(key, short_key):
            case str() as value if INT_RE.fullmatch(value):
                return int(value)
            case None:
                return default
            case value:
                logging.debug("Not an int value for %s: %s", key, value)
                return default

    def get_switch_argument(self, name:str, default:bool=False) -> bool:
        """ True if --{name} is present anywhere, otherwise the default """
        if f"{self._config.long_prefix}{name}" in self._tokens:
            return True

        return default

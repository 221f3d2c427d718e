#!/usr/bin/env python3
"""


"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from importlib.resources import files
from importlib.metadata import version
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pathlib as pl
    from typing import Final, TypeAlias
    from importlib.resources.abc import Traversable

    Loadable : TypeAlias = pl.Path | Traversable

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("flagparse")

# -- data
data_path                  = files("flagparse.__data")
constants_file : Loadable  = data_path.joinpath("constants.toml")

CONSTANT_PREFIX    : Final[str]              = "flagparse.constants"
TOOL_PREFIX        : Final[str]              = "tool.flagparse"
FLAGPARSE_TOML     : Final[str]              = "flagparse.toml"
PYPROJ_TOML        : Final[str]              = "pyproject.toml"

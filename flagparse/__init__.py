#!/usr/bin/env python3
"""
flagparse : A minimal argv lookup parser.

    parser = ArgumentParser(["--name", "bob", "-n", "3", "--verbose", "[a]", "[b]"])
    parser.get_string_argument("name", "n")  # "bob"
    parser.get_switch_argument("verbose")    # True
    parser.items                             # ("a", "b")

"""
# Imports:
from __future__ import annotations

from ._interface import __version__
from .config import ParserConfig, load_config
from .parser import ArgumentParser

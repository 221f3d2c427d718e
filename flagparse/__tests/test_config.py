#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
##-- end imports
logging = logmod.root

import pytest
from jgdv.structs.chainguard import ChainGuard
from flagparse import errors
from flagparse.config import ParserConfig, default_config, default_data, load_config
from flagparse.parser import ArgumentParser

class TestParserConfig:

    def test_sanity(self):
        assert(True is not False)

    def test_initial(self):
        config = ParserConfig()
        assert(config.long_prefix == "--")
        assert(config.short_prefix == "-")
        assert(config.item_open == "[")
        assert(config.item_close == "]")
        assert(not config.strict)

    def test_frozen(self):
        config = ParserConfig()
        with pytest.raises(Exception):
            config.strict = True

    def test_build_from_dict(self):
        config = ParserConfig.build({"strict": True, "long_prefix": "++"})
        assert(config.strict)
        assert(config.long_prefix == "++")
        assert(config.short_prefix == "-")

    def test_build_from_chainguard(self):
        config = ParserConfig.build(ChainGuard({"short_prefix": "/"}))
        assert(config.short_prefix == "/")

    @pytest.mark.parametrize("data", [
        {"long_prefix": ""},
        {"short_prefix": ""},
        {"item_open": "[["},
        {"item_close": ""},
        {"strict": "not a bool"},
    ])
    def test_build_fail(self, data):
        with pytest.raises(errors.InvalidConfigError):
            ParserConfig.build(data)

class TestDefaultConfig:

    def test_packaged_defaults(self):
        data = default_data()
        assert(data.long_prefix == "--")
        assert(data.item_close == "]")
        assert(not data.strict)

    def test_defaults_match_model(self):
        assert(default_config() == ParserConfig())

    def test_load_none(self):
        assert(load_config() == ParserConfig())

    def test_parser_uses_defaults(self):
        parser = ArgumentParser([])
        assert(parser.config == ParserConfig())

class TestLoadConfig:

    def test_pyproject(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text("\n".join([
            "[project]",
            'name = "example"',
            "[tool.flagparse]",
            "strict = true",
            'long_prefix = "++"',
        ]))
        config = load_config(target)
        assert(config.strict)
        assert(config.long_prefix == "++")
        assert(config.short_prefix == "-")

    def test_pyproject_without_table(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text('[project]\nname = "example"\n')
        with pytest.raises(errors.MissingConfigError):
            load_config(target)

    def test_flagparse_toml(self, tmp_path):
        target = tmp_path / "flagparse.toml"
        target.write_text('item_open = "{"\nitem_close = "}"\n')
        config = load_config(str(target))
        assert(config.item_open == "{")
        assert(config.item_close == "}")
        assert(not config.strict)

    def test_loaded_config_drives_parser(self, tmp_path):
        target = tmp_path / "flagparse.toml"
        target.write_text("strict = true\n")
        parser = ArgumentParser(["--x"], config=load_config(target))
        with pytest.raises(errors.MissingValueError):
            parser.get_string_argument("x", "x")

    def test_missing_file(self, tmp_path):
        with pytest.raises(errors.MissingConfigError):
            load_config(tmp_path / "nothing.toml")

    def test_bad_toml(self, tmp_path):
        target = tmp_path / "flagparse.toml"
        target.write_text("strict = = true\n")
        with pytest.raises(errors.InvalidConfigError):
            load_config(target)

    def test_bad_values(self, tmp_path):
        target = tmp_path / "flagparse.toml"
        target.write_text('item_open = "<<"\n')
        with pytest.raises(errors.InvalidConfigError):
            load_config(target)

    def test_bad_target_type(self):
        with pytest.raises(TypeError):
            load_config(5)

"""Tests for option resolution and config files."""

import json

import pytest

from save_license import ConfigurationError
from save_license.config import (
    DEFAULT_OPTIONS,
    apply_cli_overrides,
    load_options,
    locate_config_file,
    make_options,
)
from save_license.matchers import DEFAULT_PATTERN_SOURCE, PATTERN_FLAGS


class TestDefaults:

    def test_default_options(self):
        assert DEFAULT_OPTIONS.encoding == "utf-8"
        assert DEFAULT_OPTIONS.grammar == "javascript"
        (pattern,) = DEFAULT_OPTIONS.patterns
        assert pattern.pattern == DEFAULT_PATTERN_SOURCE
        assert pattern.flags & PATTERN_FLAGS == PATTERN_FLAGS

    def test_missing_config_returns_defaults(self, tmp_path):
        assert load_options(tmp_path) is DEFAULT_OPTIONS


class TestConfigFiles:

    def test_toml_config(self, tmp_path):
        (tmp_path / "save-license.toml").write_text(
            '[options]\npatterns = ["SPDX-License-Identifier", "copyright"]\n'
            'encoding = "latin-1"\ngrammar = "c-style"\n',
            encoding="utf-8",
        )

        options = load_options(tmp_path)

        assert [p.pattern for p in options.patterns] == ["SPDX-License-Identifier", "copyright"]
        assert options.patterns[1].search("COPYRIGHT")
        assert options.encoding == "latin-1"
        assert options.grammar == "c-style"

    def test_json_rc_config(self, tmp_path):
        (tmp_path / ".savelicenserc").write_text(
            json.dumps({"options": {"patterns": "License"}}), encoding="utf-8"
        )

        options = load_options(tmp_path)

        assert [p.pattern for p in options.patterns] == ["License"]
        assert options.encoding == DEFAULT_OPTIONS.encoding

    def test_toml_preferred_over_rc(self, tmp_path):
        (tmp_path / "save-license.toml").write_text("", encoding="utf-8")
        (tmp_path / ".savelicenserc").write_text("{}", encoding="utf-8")

        assert locate_config_file(tmp_path) == tmp_path / "save-license.toml"

    def test_explicit_path(self, tmp_path):
        config = tmp_path / "custom.json"
        config.write_text(json.dumps({"options": {"encoding": "utf-16"}}), encoding="utf-8")

        assert load_options(tmp_path, config).encoding == "utf-16"

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_options(tmp_path, tmp_path / "nope.toml")

    def test_malformed_toml_raises(self, tmp_path):
        (tmp_path / "save-license.toml").write_text("[options\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Could not read configuration"):
            load_options(tmp_path)

    def test_bad_patterns_type_raises(self, tmp_path):
        (tmp_path / ".savelicenserc").write_text(
            json.dumps({"options": {"patterns": 3}}), encoding="utf-8"
        )

        with pytest.raises(ConfigurationError, match="patterns"):
            load_options(tmp_path)

    @pytest.mark.parametrize("content", ["[]", '"x"', "3"])
    def test_non_object_root_raises(self, tmp_path, content):
        (tmp_path / ".savelicenserc").write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError, match="root must be a table or object") as exc_info:
            load_options(tmp_path)
        assert exc_info.value.path.endswith(".savelicenserc")

    def test_empty_patterns_list_raises(self, tmp_path):
        (tmp_path / "save-license.toml").write_text("[options]\npatterns = []\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="At least one license pattern"):
            load_options(tmp_path)


class TestValidation:

    def test_invalid_regex(self):
        with pytest.raises(ConfigurationError, match="Invalid license pattern"):
            make_options(["(unclosed"])

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError, match="Unknown text encoding"):
            make_options(encoding="no-such-codec")

    def test_unknown_grammar(self):
        with pytest.raises(ConfigurationError) as exc_info:
            make_options(grammar="cobol")
        assert "c-style" in exc_info.value.hint


def test_cli_overrides_layer_on_loaded_options():
    base = make_options(["License"], "latin-1")

    options = apply_cli_overrides(base, grammar="c-style")

    assert options.patterns == base.patterns
    assert options.encoding == "latin-1"
    assert options.grammar == "c-style"
    assert apply_cli_overrides(base) is base

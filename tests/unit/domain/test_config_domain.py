from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. JSON config files merged over the defaults.
3. Resilience against missing and corrupted config files.
"""

import json

from deptreediff.domain.config import VALID_MODES, get_default_config, load_config


def test_default_config_values():
    config = get_default_config()

    assert config["mode"] == "tree"
    assert config["mode"] in VALID_MODES
    assert config["sort_siblings"] is True
    assert config["changes_only"] is False


def test_default_config_is_a_fresh_copy():
    first = get_default_config()
    first["mode"] = "flat"

    assert get_default_config()["mode"] == "tree"


def test_load_without_path_returns_defaults():
    assert load_config() == get_default_config()


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_merges_file_over_defaults(tmp_path):
    config_path = tmp_path / "deptreediff.json"
    config_path.write_text(json.dumps({"changes_only": True}), encoding="utf-8")

    config = load_config(str(config_path))

    assert config["changes_only"] is True
    assert config["mode"] == "tree"


def test_load_corrupted_file_returns_defaults(tmp_path):
    config_path = tmp_path / "broken.json"
    config_path.write_text("{ invalid json", encoding="utf-8")

    assert load_config(str(config_path)) == get_default_config()


def test_load_non_object_returns_defaults(tmp_path):
    config_path = tmp_path / "list.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config(str(config_path)) == get_default_config()

"""Tests for EnvConfig store access and typed getters."""
from __future__ import annotations

import math

import pytest

from envkit.env_config import EnvConfig
from envkit.errors import MissingEnvError
from envkit.store import MemoryStore
from tests.fixtures import NullLoader, make_env, write_env_file


class TestStoreAccess:
    """Test get/set/clear."""

    def test_get_returns_stored_value(self):
        env = make_env({"BASE_PATH": "/srv/app"})
        assert env.get("BASE_PATH", "/tmp") == "/srv/app"

    def test_get_falls_back_only_when_absent(self):
        """Falsy stored values are returned, not replaced by the default."""
        env = make_env({"EMPTY": "", "ZERO": "0"})

        assert env.get("EMPTY", "default") == ""
        assert env.get("ZERO", "default") == "0"
        assert env.get("MISSING", "default") == "default"
        assert env.get("MISSING") is None

    def test_get_triggers_load_once(self):
        loader = NullLoader()
        env = EnvConfig(store=MemoryStore(), loader=loader)

        env.get("A")
        env.get("B")

        assert loader.calls == 2  # loader itself memoizes

    def test_get_reads_env_file(self, tmp_path):
        write_env_file(tmp_path, "FROM_FILE=yes\n")
        env = make_env(base_path=tmp_path)

        assert env.get("FROM_FILE") == "yes"

    def test_set_returns_value(self):
        env = make_env()
        assert env.set("PORT", 8000) == 8000
        assert env.get("PORT") == 8000

    def test_clear_removes_keys(self):
        env = make_env({"A": "1", "B": "2", "C": "3"})

        env.clear("A", "B", "NOT_THERE")

        assert env.get("A") is None
        assert env.get("B") is None
        assert env.get("C") == "3"


class TestListGetters:
    """Test get_array and friends."""

    def test_get_array_trims_compacts_and_dedupes(self):
        env = make_env({"K": "a, a, ,b"})
        assert env.get_array("K") == ["a", "b"]

    def test_get_array_missing_key(self):
        env = make_env()
        assert env.get_array("MISSING") == []

    def test_get_array_default_items_first(self):
        env = make_env({"K": "c,a"})
        assert env.get_array("K", ["a", "b"]) == ["a", "b", "c"]

    def test_get_array_scalar_default(self):
        env = make_env()
        assert env.get_array("MISSING", "only") == ["only"]

    def test_get_array_blank_key_reads_default_only(self):
        env = make_env({"": "ignored"})
        assert env.get_array("", ["x"]) == ["x"]
        assert env.get_array(None, "y") == ["y"]

    def test_get_array_stringifies_defaults(self):
        env = make_env()
        assert env.get_array("MISSING", [1, " 2 "]) == ["1", "2"]

    def test_get_numbers(self):
        env = make_env({"K": "1,2,2,3"})
        assert env.get_numbers("K") == [1, 2, 3]

    def test_get_numbers_unparseable_is_nan(self):
        env = make_env({"K": "1,x"})
        numbers = env.get_numbers("K")
        assert numbers[0] == 1
        assert math.isnan(numbers[1])

    def test_get_strings(self):
        env = make_env({"CATEGORIES": "Fashion, Technology"})
        assert env.get_strings("CATEGORIES") == ["Fashion", "Technology"]

    def test_get_string_set_sorted_unique(self):
        env = make_env({"K": "b,a,a"})
        assert env.get_string_set("K") == ["a", "b"]

    def test_get_string_set_merges_default(self):
        env = make_env({"K": "c,a"})
        assert env.get_string_set("K", ["b", "c"]) == ["a", "b", "c"]


class TestScalarGetters:
    """Test get_number/get_string/get_boolean/get_object."""

    def test_get_number(self):
        env = make_env({"AGE": "11", "RATIO": "3.2"})
        assert env.get_number("AGE") == 11
        assert env.get_number("RATIO") == 3.2

    def test_get_number_default(self):
        env = make_env()
        assert env.get_number("MISSING", 8000) == 8000
        assert env.get_number("MISSING") is None

    def test_get_number_coerces_string_default(self):
        env = make_env()
        assert env.get_number("MISSING", "42") == 42

    def test_get_number_falsy_values_pass_through(self):
        """Falsy resolved values are not coerced."""
        env = make_env({"EMPTY": ""})
        assert env.get_number("MISSING", 0) == 0
        assert env.get_number("EMPTY", 5) == ""

    def test_get_number_unparseable(self):
        env = make_env({"K": "abc"})
        assert math.isnan(env.get_number("K"))

    def test_get_string(self):
        env = make_env({"CATEGORY": "Fashion"})
        assert env.get_string("CATEGORY") == "Fashion"
        assert env.get_string("MISSING", 3.2) == "3.2"
        assert env.get_string("MISSING") is None
        assert env.get_string("MISSING", "") == ""

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("false", False),
        ("yes", True),
        ("0", True),
    ])
    def test_get_boolean(self, raw, expected):
        env = make_env({"K": raw})
        assert env.get_boolean("K") is expected

    def test_get_boolean_defaults(self):
        env = make_env({"EMPTY": ""})
        assert env.get_boolean("MISSING", False) is False
        assert env.get_boolean("MISSING", True) is True
        assert env.get_boolean("MISSING") is None
        assert env.get_boolean("EMPTY", True) == ""

    def test_get_object(self):
        env = make_env({"OBJECT": '{"lead": {"ref": "Person"}}'})
        assert env.get_object("OBJECT") == {"lead": {"ref": "Person"}}

    def test_get_object_missing(self):
        env = make_env()
        assert env.get_object("MISSING") == {}
        assert env.get_object("MISSING", {"a": "1"}) == {"a": 1}

    def test_get_object_invalid_json_returns_raw(self):
        env = make_env({"OBJECT": "{not json"})
        assert env.get_object("OBJECT") == "{not json"

    def test_get_object_deeply_nested_returns_raw(self):
        raw = "[" * 100000
        env = make_env({"OBJECT": raw})
        assert env.get_object("OBJECT") == raw


class TestSupplementalAccessors:
    """Test is_set/require/get_all."""

    def test_is_set(self):
        env = make_env({"A": "1", "BLANK": "  "})
        assert env.is_set("A")
        assert not env.is_set("BLANK")
        assert not env.is_set("MISSING")

    def test_require(self):
        env = make_env({"API_KEY": "secret"})
        assert env.require("API_KEY") == "secret"

    def test_require_missing_raises(self):
        env = make_env({"BLANK": ""})

        with pytest.raises(MissingEnvError) as exc:
            env.require("BLANK")
        assert "BLANK" in str(exc.value)

        with pytest.raises(KeyError):
            env.require("MISSING")

    def test_get_all_by_prefix(self):
        env = make_env({"APP_PORT": "1", "APP_HOST": "h", "OTHER": "x"})
        assert env.get_all("APP_") == {"APP_PORT": "1", "APP_HOST": "h"}

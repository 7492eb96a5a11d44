from collections import OrderedDict, defaultdict

import pytest

from nettag.outils.helpers import is_object, parse_env, stringify, stringify_error

pytestmark = pytest.mark.unit


class TestParseEnv:

    def test_unset_is_none(self):
        assert parse_env("NETTAG_TEST_UNSET", environ={}) is None

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("null", None),
        ("3", 3),
        ('"text"', "text"),
        ('{"a": [1, 2]}', {"a": [1, 2]}),
    ])
    def test_json_values(self, raw, expected):
        assert parse_env("KEY", environ={"KEY": raw}) == expected

    @pytest.mark.parametrize("raw", ["", "yes", "{", "True"])
    def test_unparsable_is_none(self, raw):
        assert parse_env("KEY", environ={"KEY": raw}) is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("NETTAG_TEST_FLAG", "false")
        assert parse_env("NETTAG_TEST_FLAG") is False


class TestStringify:

    def test_json_values(self):
        assert stringify({"whitelist": False, "pathFragments": []}) == '{"whitelist": false, "pathFragments": []}'
        assert stringify(None) == "null"

    def test_non_json_values_fall_back_to_repr(self):
        assert stringify({1, 2}) == '"{1, 2}"'

    def test_circular_reference(self):
        value = []
        value.append(value)
        assert stringify(value) == "[[...]]"


class TestStringifyError:

    def test_unraised_error(self):
        assert stringify_error(ValueError("bad")) == "ValueError: bad"

    def test_raised_error_includes_traceback(self):
        try:
            raise ValueError("bad")
        except ValueError as e:
            text = stringify_error(e)
        assert text.startswith("Traceback")
        assert text.endswith("ValueError: bad")


def test_is_object():
    assert is_object({})
    assert not is_object([])
    assert not is_object(None)
    assert not is_object("{}")


def test_is_object_rejects_dict_subclasses():
    assert not is_object(OrderedDict(whitelist=False))
    assert not is_object(defaultdict(list))

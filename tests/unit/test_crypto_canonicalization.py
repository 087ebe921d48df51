"""Tests for the pipe-delimited canonical form."""

from __future__ import annotations

from collections import OrderedDict

from msgauth.core.crypto.canonicalization import FIELD_DELIMITER, concatenate


class TestConcatenate:
    """Tests for field flattening."""

    def test_scalars_and_none(self) -> None:
        assert concatenate("a", "b", None) == "a|b|"

    def test_single_sequence(self) -> None:
        assert concatenate(["x", "y"]) == "x|y"

    def test_tuple_and_set_are_collections(self) -> None:
        assert concatenate(("x", "y")) == "x|y"
        assert concatenate({"only"}) == "only"

    def test_mapping_pairs_in_iteration_order(self) -> None:
        fields = OrderedDict([("to", "bob"), ("amount", 5)])
        assert concatenate(fields) == "to|bob|amount|5"

    def test_mapping_none_key_and_value(self) -> None:
        assert concatenate({None: "v", "k": None}) == "|v|k|"

    def test_none_inside_sequence(self) -> None:
        assert concatenate(["a", None, "c"]) == "a||c"

    def test_nested_containers_not_flattened(self) -> None:
        assert concatenate(["a", ["b", "c"]]) == "a|['b', 'c']"
        assert concatenate([{"k": 1}]) == "{'k': 1}"

    def test_strings_are_not_split(self) -> None:
        assert concatenate("xy") == "xy"

    def test_numbers_use_str(self) -> None:
        assert concatenate(1, 2.5, True) == "1|2.5|True"

    def test_mixed(self) -> None:
        assert concatenate("tx", ["a", "b"], {"k": "v"}, 3) == "tx|a|b|k|v|3"

    def test_no_values(self) -> None:
        assert concatenate() == ""

    def test_all_none(self) -> None:
        assert concatenate(None, None) == "|"

    def test_empty_collections(self) -> None:
        assert concatenate([], {}) == "|"

    def test_deterministic(self) -> None:
        values = ("a", ["b", "c"], {"d": "e"}, None, 7)
        assert concatenate(*values) == concatenate(*values)

    def test_delimiter_is_not_escaped(self) -> None:
        """A value containing the delimiter is indistinguishable from two fields."""
        assert FIELD_DELIMITER == "|"
        assert concatenate("a|b") == concatenate("a", "b")
        assert concatenate(["a|b"]) == concatenate(["a", "b"])

"""
Section: ordered keys, header parsing, serialization.
"""

import pytest

from inidoc.errors import (
    DuplicateName,
    IniSyntaxError,
    InvalidIdentifier,
)
from inidoc.ini import Key, Section


def _abc() -> Section:
    s = Section("A")
    s.add(Key("a", "1"))
    s.add(Key("b", "2"))
    s.add(Key("c", "3"))
    return s


class TestSectionNames:

    def test_unnamed(self):
        assert Section().name is None
        assert Section("1bad").name is None
        assert Section("").name is None

    def test_named(self):
        assert Section("Window").name == "Window"

    def test_invalid_name_assignment_raises(self):
        s = Section("A")
        with pytest.raises(InvalidIdentifier):
            s.name = "has space"
        with pytest.raises(InvalidIdentifier):
            s.set_name(None)
        assert s.name == "A"


class TestSectionKeys:

    def test_add_and_get(self):
        s = Section("A")
        s.add(Key("k", "v"))
        assert s.contains("k")
        assert "k" in s
        assert s.get("k") == Key("k", "v")
        assert len(s) == 1
        assert not s.empty

    def test_missing_lookup_is_none(self):
        s = Section("A")
        assert s.get("NoSuchKey") is None
        assert not s.contains("NoSuchKey")
        with pytest.raises(KeyError):
            s["NoSuchKey"]

    def test_add_duplicate(self):
        s = _abc()
        with pytest.raises(DuplicateName):
            s.add(Key("b", "9"))
        assert s.get("b").value == "2"

    def test_duplicate_is_key_error(self):
        s = _abc()
        with pytest.raises(KeyError):
            s.add(Key("a", "0"))

    def test_replace_keeps_position(self):
        s = _abc()
        s.add(Key("b", "20"), replace=True)
        assert list(s) == ["a", "b", "c"]
        assert s.get("b").value == "20"
        assert s.serialize() == "[A]\na = 1\nb = 20\nc = 3"

    def test_add_invalid(self):
        s = Section("A")
        with pytest.raises(InvalidIdentifier):
            s.add(None)
        with pytest.raises(InvalidIdentifier):
            s.add(Key("1x", "v"))
        assert s.empty

    def test_remove(self):
        s = _abc()
        assert s.remove("b") is True
        assert s.remove("b") is False
        assert list(s) == ["a", "c"]

    def test_clear(self):
        s = _abc()
        s.clear()
        assert s.empty
        assert s.name == "A"

    def test_item_assignment(self):
        s = _abc()
        s["b"] = Key("b", "x")
        assert list(s) == ["a", "b", "c"]
        s["d"] = Key("d", "4")
        assert list(s) == ["a", "b", "c", "d"]

    def test_item_assignment_name_mismatch(self):
        s = _abc()
        with pytest.raises(ValueError):
            s["b"] = Key("c", "x")

    def test_del_item(self):
        s = _abc()
        del s["a"]
        assert list(s) == ["b", "c"]


class TestSectionParsing:

    def test_name_line(self):
        s = Section()
        s.parse_name_line("  [ Window ]  ")
        assert s.name == "Window"

    def test_closing_bracket_is_required(self):
        with pytest.raises(IniSyntaxError):
            Section().parse_name_line("[Section")
        assert Section.from_line("[Section") is None

    @pytest.mark.parametrize("line", ["", "[]", "A]", "Section", "k = v"])
    def test_not_a_header(self, line):
        with pytest.raises(IniSyntaxError):
            Section().parse_name_line(line)

    def test_invalid_name_inside_brackets(self):
        with pytest.raises(InvalidIdentifier):
            Section().parse_name_line("[1st]")
        with pytest.raises(InvalidIdentifier):
            Section().parse_name_line("[ ]")

    def test_from_line(self):
        s = Section.from_line("[Player]")
        assert s is not None
        assert s.name == "Player"
        assert s.empty
        assert Section.from_line("a = 1") is None

    def test_key_line(self):
        s = Section("A")
        s.parse_key_line("x = 1")
        assert s.get("x").value == "1"
        with pytest.raises(DuplicateName):
            s.parse_key_line("x = 2")
        s.parse_key_line("x = 3", replace=True)
        assert s.get("x").value == "3"

    def test_key_line_errors(self):
        with pytest.raises(IniSyntaxError):
            Section("A").parse_key_line("no separator")
        with pytest.raises(InvalidIdentifier):
            Section("A").parse_key_line("9 = nine")


class TestSectionSerialize:

    def test_header_only(self):
        assert Section("A").serialize() == "[A]"

    def test_keys_in_order(self):
        s = _abc()
        s.add(Key("empty"))
        assert str(s) == "[A]\na = 1\nb = 2\nc = 3\nempty = "

    def test_values_written_verbatim(self):
        s = Section("A")
        k = Key("x")
        k.value = " padded "
        s.add(k)
        assert s.serialize() == "[A]\nx =  padded "

    def test_equality(self):
        assert _abc() == _abc()
        other = _abc()
        other.name = "B"
        assert _abc() != other

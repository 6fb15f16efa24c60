"""Tests for the String class."""

import pytest
from pydantic import ValidationError

from klassy import Slice, String


def values(pieces) -> list[str]:
    return [piece.value() for piece in pieces]


class TestStringBasics:
    """Tests for construction and access."""

    def test_round_trip(self):
        """Tests that wrapping and unwrapping returns the original string."""
        for raw in ["", "hello", "héllo wörld", "日本語\n"]:
            assert String.new(raw).value() == raw

    def test_length_counts_code_points(self):
        """Tests that length counts characters, not bytes."""
        assert String.new("héllo").length() == 5
        assert len(String.new("日本")) == 2

    def test_str_returns_raw_text(self):
        """Tests that str() gives back the wrapped text."""
        assert str(String.new("abc")) == "abc"

    def test_value_equality_and_hash(self):
        """Tests that equal texts are equal and hash alike."""
        assert String.new("a") == String.new("a")
        assert {String.new("a"), String.new("a")} == {String.new("a")}

    def test_is_immutable(self):
        """Tests that the wrapped text cannot be reassigned."""
        s = String.new("abc")
        with pytest.raises(ValidationError):
            s.text = "xyz"

    def test_rejects_non_string(self):
        """Tests that a non-string value is refused at construction."""
        with pytest.raises(ValidationError):
            String.new(3)  # type: ignore[arg-type]

    def test_transforms_return_new_instances(self):
        """Tests that transforming never modifies the source value."""
        s = String.new("Hello")
        upper = s.to_upper()
        assert upper.value() == "HELLO"
        assert s.value() == "Hello"


class TestStringQueries:
    """Tests for the search and predicate methods."""

    def test_contains(self):
        """Tests the contains family."""
        s = String.new("seafood")
        assert s.contains("foo")
        assert not s.contains("bar")
        assert s.contains("")
        assert s.contains_any("xyzf")
        assert not s.contains_any("")
        assert s.contains_func(str.isupper) is False
        assert s.contains_rune("a")

    def test_contains_rune_requires_one_character(self):
        """Tests that a multi-character rune is a programming error."""
        with pytest.raises(ValueError):
            String.new("abc").contains_rune("ab")

    def test_count(self):
        """Tests counting, including the empty substring."""
        assert String.new("cheese").count("e") == 3
        assert String.new("five").count("") == 5

    def test_prefix_and_suffix(self):
        """Tests has_prefix and has_suffix."""
        s = String.new("Gopher")
        assert s.has_prefix("Go")
        assert not s.has_prefix("C")
        assert s.has_suffix("er")
        assert s.has_suffix("")

    def test_index_family(self):
        """Tests that searches return positions or -1."""
        s = String.new("chicken")
        assert s.index("ken") == 4
        assert s.index("dmr") == -1
        assert s.last_index("c") == 3
        assert s.last_index("") == 7
        assert s.index_any("kc") == 0
        assert s.index_any("") == -1
        assert s.last_index_any("kc") == 4
        assert s.index_rune("k") == 4
        assert s.index_byte(ord("k")) == 4
        assert s.last_index_byte(ord("c")) == 3
        assert s.index_func(lambda c: c == "z") == -1
        assert s.last_index_func(lambda c: c in "ch") == 3

    def test_index_byte_requires_ascii(self):
        """Tests that a non-ASCII byte code is rejected."""
        with pytest.raises(ValueError):
            String.new("abc").index_byte(300)

    def test_equal_fold(self):
        """Tests case-insensitive comparison."""
        assert String.new("Go").equal_fold("GO")
        assert String.new("Straße").equal_fold("STRASSE")
        assert not String.new("Go").equal_fold("Gopher")


class TestStringCut:
    """Tests for cut, cut_prefix and cut_suffix."""

    def test_cut_found(self):
        """Tests cutting around a present separator."""
        before, after, found = String.new("key=value").cut("=")
        assert (before.value(), after.value(), found) == ("key", "value", True)

    def test_cut_not_found_returns_original(self):
        """Tests that a missing separator returns the original value."""
        s = String.new("noequals")
        before, after, found = s.cut("=")
        assert before is s
        assert (after.value(), found) == ("", False)

    def test_cut_empty_separator(self):
        """Tests that the empty separator is found at the start."""
        before, after, found = String.new("abc").cut("")
        assert (before.value(), after.value(), found) == ("", "abc", True)

    def test_cut_prefix_and_suffix(self):
        """Tests removing affixes with a found flag."""
        after, found = String.new("Gopher").cut_prefix("Go")
        assert (after.value(), found) == ("pher", True)

        s = String.new("Gopher")
        after, found = s.cut_prefix("ph")
        assert after is s and not found

        before, found = String.new("Gopher").cut_suffix("er")
        assert (before.value(), found) == ("Goph", True)

        before, found = String.new("Gopher").cut_suffix("")
        assert (before.value(), found) == ("Gopher", True)

        s = String.new("Gopher")
        before, found = s.cut_suffix("Go")
        assert before is s and not found


class TestStringSplitting:
    """Tests for the eager and lazy split methods."""

    def test_split_returns_slice_of_strings(self):
        """Tests that split wraps each piece as a String inside a Slice."""
        pieces = String.new("a,,b").split(",")
        assert isinstance(pieces, Slice)
        assert all(isinstance(piece, String) for piece in pieces)
        assert values(pieces) == ["a", "", "b"]

    def test_split_edge_cases(self):
        """Tests the documented empty-input and empty-separator behaviour."""
        assert values(String.new("abc").split("x")) == ["abc"]
        assert values(String.new("").split(",")) == [""]
        assert values(String.new("héj").split("")) == ["h", "é", "j"]
        assert values(String.new("").split("")) == []

    def test_split_join_inverse(self):
        """Tests that joining split pieces with the separator restores the input."""
        for raw in ["a,b,c", ",a,,b,", "", "no separators"]:
            sep = String.new(",")
            assert sep.join(String.new(raw).split(",")).value() == raw

    def test_split_n(self):
        """Tests the piece-count limit."""
        s = String.new("a,b,c,d")
        assert values(s.split_n(",", 2)) == ["a", "b,c,d"]
        assert values(s.split_n(",", 0)) == []
        assert values(s.split_n(",", -1)) == ["a", "b", "c", "d"]
        assert values(String.new("abcd").split_n("", 2)) == ["a", "bcd"]
        assert values(String.new("ab").split_n("", 5)) == ["a", "b"]

    def test_split_after(self):
        """Tests that split_after keeps the separator on each piece."""
        assert values(String.new("a,b,c").split_after(",")) == ["a,", "b,", "c"]
        assert values(String.new("a,b,").split_after(",")) == ["a,", "b,", ""]
        assert values(String.new("a,b,c,d").split_after_n(",", 2)) == [
            "a,",
            "b,c,d",
        ]
        assert values(String.new("").split_after("")) == []
        assert values(String.new("abcd").split_after_n("", 3)) == ["a", "b", "cd"]
        assert values(String.new("ab").split_after_n("", 9)) == ["a", "b"]

    def test_fields(self):
        """Tests splitting on whitespace runs."""
        assert values(String.new("  foo bar\t baz\n ").fields()) == [
            "foo",
            "bar",
            "baz",
        ]
        assert values(String.new(" \t\n").fields()) == []

    def test_fields_func(self):
        """Tests splitting on runs of characters matching a predicate."""
        not_letter = lambda c: not c.isalpha()  # noqa: E731
        assert values(String.new("  foo1;bar2,baz3...").fields_func(not_letter)) == [
            "foo",
            "bar",
            "baz",
        ]
        assert values(String.new("123").fields_func(str.isdigit)) == []

    def test_lazy_variants_match_eager(self):
        """Tests that the *_seq methods yield what the eager forms return."""
        s = String.new(" a,b  c,,d ")
        assert values(s.split_seq(",")) == values(s.split(","))
        assert values(s.split_after_seq(",")) == values(s.split_after(","))
        assert values(s.fields_seq()) == values(s.fields())
        is_comma = lambda c: c == ","  # noqa: E731
        assert values(s.fields_func_seq(is_comma)) == values(s.fields_func(is_comma))
        assert values(String.new("").split_seq("")) == []
        assert values(String.new("a\n").split_after_seq("\n")) == ["a\n", ""]

    def test_lines(self):
        """Tests that lines keep their terminators and skip empty input."""
        assert values(String.new("a\nb\n").lines()) == ["a\n", "b\n"]
        assert values(String.new("a\n\nb").lines()) == ["a\n", "\n", "b"]
        assert values(String.new("").lines()) == []

    def test_iterators_are_single_pass(self):
        """Tests that an exhausted iterator yields nothing more."""
        lines = String.new("x\ny").lines()
        assert len(list(lines)) == 2
        assert list(lines) == []

    def test_iterators_are_lazy(self):
        """Tests that pieces are produced on demand."""
        pieces = String.new("a,b,c").split_seq(",")
        assert next(pieces).value() == "a"

    def test_abandoned_iterator_leaves_value_intact(self):
        """Tests that dropping a half-consumed iterator does not affect later calls."""
        s = String.new("a\nb\nc")
        for iterator in (s.lines(), s.split_seq("\n"), s.fields_seq()):
            next(iterator)
            iterator.close()
            assert list(iterator) == []
        del iterator
        assert values(s.lines()) == ["a\n", "b\n", "c"]
        assert values(s.split_seq("\n")) == ["a", "b", "c"]


class TestStringTransforms:
    """Tests for the methods returning a modified copy."""

    def test_join_stringifies_elements(self):
        """Tests that join accepts any objects."""
        assert String.new(", ").join([1, "two", 3.0]).value() == "1, two, 3.0"
        assert String.new("-").join(Slice.new(["a", "b"])).value() == "a-b"

    def test_map(self):
        """Tests character mapping, including dropping characters."""
        rot = {"a": "b", "b": "c"}
        assert String.new("abx").map(lambda c: rot.get(c, c)).value() == "bcx"
        assert String.new("a-b-c").map(lambda c: None if c == "-" else c).value() == (
            "abc"
        )

    def test_repeat(self):
        """Tests repetition and the negative count failure."""
        assert String.new("na").repeat(2).value() == "nana"
        assert String.new("na").repeat(0).value() == ""
        with pytest.raises(ValueError):
            String.new("na").repeat(-1)

    def test_replace(self):
        """Tests bounded and unbounded replacement."""
        s = String.new("oink oink oink")
        assert s.replace("k", "ky", 2).value() == "oinky oinky oink"
        assert s.replace("oink", "moo", -1).value() == "moo moo moo"
        assert s.replace("oink", "moo", -7).value() == "moo moo moo"
        assert s.replace_all("oink", "moo") == s.replace("oink", "moo", -1)
        assert String.new("ab").replace_all("", "-").value() == "-a-b-"

    def test_case_conversion(self):
        """Tests Unicode-aware case mapping."""
        assert String.new("Gopher ß").to_upper().value() == "GOPHER SS"
        assert String.new("ΑΒΓ").to_lower().value() == "αβγ"
        assert String.new("loud noises").to_title().value() == "LOUD NOISES"
        assert String.new("ǆ").to_title().value() == "ǅ"

    def test_to_valid_utf8(self):
        """Tests that runs of lone surrogates are replaced once."""
        raw = b"a\xffb\xfe\xfdc".decode("utf-8", "surrogateescape")
        s = String.new(raw)
        assert s.to_valid_utf8("?").value() == "a?b?c"
        assert s.to_valid_utf8("").value() == "abc"
        assert String.new("fine").to_valid_utf8("?").value() == "fine"

    def test_trim(self):
        """Tests the cutset based trims."""
        assert String.new(" Hello World! ").trim(" ").value() == "Hello World!"
        assert String.new("¡¡¡Hello!!!").trim("!¡").value() == "Hello"
        assert String.new("¡¡¡Hello!!!").trim_left("!¡").value() == "Hello!!!"
        assert String.new("¡¡¡Hello!!!").trim_right("!¡").value() == "¡¡¡Hello"
        assert String.new(" x ").trim("").value() == " x "

    def test_trim_func(self):
        """Tests the predicate based trims."""
        digit = str.isdigit
        assert String.new("123abc456").trim_func(digit).value() == "abc"
        assert String.new("123abc456").trim_left_func(digit).value() == "abc456"
        assert String.new("123abc456").trim_right_func(digit).value() == "123abc"
        assert String.new("123").trim_func(digit).value() == ""

    def test_trim_affixes_and_space(self):
        """Tests prefix, suffix and whitespace trimming."""
        s = String.new("¡¡¡Hello, Gophers!!!")
        assert s.trim_prefix("¡¡¡Hello, ").value() == "Gophers!!!"
        assert s.trim_prefix("nope").value() == s.value()
        assert s.trim_suffix(", Gophers!!!").value() == "¡¡¡Hello"
        assert String.new("　\t Hi \n").trim_space().value() == "Hi"

    def test_chaining(self):
        """Tests that methods compose left to right."""
        result = String.new("  Key=Value  ").trim_space().to_lower().cut("=")
        assert (result[0].value(), result[1].value(), result[2]) == (
            "key",
            "value",
            True,
        )

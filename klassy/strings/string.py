"""
Immutable, chainable wrapper around Python's native ``str``.

The String type mirrors the surface of a classic strings package (trim,
search, split, case mapping, replacement) as methods, so text processing
reads left to right:

```python
from klassy import String

String.new("  Key=Value  ").trim_space().to_lower().cut("=")
```

Every transforming method returns a new String. Methods that produce several
substrings return a ``Slice[String]`` (eager) or a single-pass iterator of
String (the ``*_seq`` and ``lines`` variants). Positions and lengths are
counted in code points, the native unit of ``str``.

"Not found" is never an error: searches return ``-1`` and the cut family
reports a ``found`` flag. Misuse, such as a negative repeat count, raises
immediately.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from itertools import groupby

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field

from klassy.collections.slice import Slice
from klassy.strings.special_case import SpecialCase

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\S+")
_SURROGATE_RUN = re.compile(r"[\ud800-\udfff]+")


class String(BaseModel):
    """
    An immutable text value with chainable string operations.

    Instances compare and hash by value, so they can be shared freely and
    used as dictionary keys. ``str(s)`` gives back the wrapped text.

    Attributes:
        text: The wrapped native string.

    Example:
        ```python
        before, after, found = String.new("key=value").cut("=")
        assert (before.value(), after.value(), found) == ("key", "value", True)

        String.new("a,,b").split(",").map_to(String.value).items()
        # ["a", "", "b"]
        ```
    """

    text: str = Field(
        description="The wrapped native string",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls, s: str) -> String:
        """Wrap the native string ``s``."""
        return cls(text=s)

    def value(self) -> str:
        """Return the wrapped native string unchanged."""
        return self.text

    def length(self) -> int:
        """Return the number of code points in the wrapped string."""
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    # Queries

    def contains(self, substr: str) -> bool:
        return substr in self.text

    def contains_any(self, chars: str) -> bool:
        """Report whether any character of ``chars`` occurs in the string."""
        return self.index_any(chars) >= 0

    def contains_func(self, f: Callable[[str], bool]) -> bool:
        """Report whether any character ``c`` of the string satisfies ``f(c)``."""
        return self.index_func(f) >= 0

    def contains_rune(self, r: str) -> bool:
        return _rune(r) in self.text

    def count(self, substr: str) -> int:
        """
        Count the non-overlapping occurrences of ``substr``.

        An empty ``substr`` matches before every character and at the end,
        so the result is ``1 + length()``.
        """
        return self.text.count(substr)

    def equal_fold(self, t: str) -> bool:
        """Report whether the string equals ``t`` under Unicode case folding."""
        return self.text.casefold() == t.casefold()

    def has_prefix(self, prefix: str) -> bool:
        return self.text.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        return self.text.endswith(suffix)

    def index(self, substr: str) -> int:
        """Return the position of the first ``substr``, or -1 if absent."""
        return self.text.find(substr)

    def index_any(self, chars: str) -> int:
        """Return the position of the first character found in ``chars``, or -1."""
        return _first_index(self.text, chars.__contains__)

    def index_byte(self, c: int) -> int:
        """
        Return the position of the first occurrence of the ASCII code ``c``.

        Raises:
            ValueError: If ``c`` is not an ASCII code (0-127).
        """
        return self.text.find(_ascii(c))

    def index_func(self, f: Callable[[str], bool]) -> int:
        """Return the position of the first character satisfying ``f``, or -1."""
        return _first_index(self.text, f)

    def index_rune(self, r: str) -> int:
        return self.text.find(_rune(r))

    def last_index(self, substr: str) -> int:
        """Return the position of the last ``substr``, or -1 if absent."""
        return self.text.rfind(substr)

    def last_index_any(self, chars: str) -> int:
        return _last_index(self.text, chars.__contains__)

    def last_index_byte(self, c: int) -> int:
        return self.text.rfind(_ascii(c))

    def last_index_func(self, f: Callable[[str], bool]) -> int:
        return _last_index(self.text, f)

    # Cutting

    def cut(self, sep: str) -> tuple[String, String, bool]:
        """
        Slice the string around the first instance of ``sep``.

        Returns:
            The text before and after ``sep`` and whether ``sep`` was found.
            When it was not found the result is ``(self, "", False)``.
        """
        position = self.text.find(sep)
        if position < 0:
            return self, String.new(""), False
        return (
            String.new(self.text[:position]),
            String.new(self.text[position + len(sep) :]),
            True,
        )

    def cut_prefix(self, prefix: str) -> tuple[String, bool]:
        """
        Remove a leading ``prefix`` and report whether it was present.

        If the string does not start with ``prefix`` it is returned as is,
        together with ``False``. An empty prefix is always found.
        """
        if not self.text.startswith(prefix):
            return self, False
        return String.new(self.text[len(prefix) :]), True

    def cut_suffix(self, suffix: str) -> tuple[String, bool]:
        """
        Remove a trailing ``suffix`` and report whether it was present.

        If the string does not end with ``suffix`` it is returned as is,
        together with ``False``. An empty suffix is always found.
        """
        if not self.text.endswith(suffix):
            return self, False
        return String.new(self.text[: len(self.text) - len(suffix)]), True

    # Splitting

    def fields(self) -> Slice[String]:
        """
        Split around runs of Unicode whitespace.

        A string made only of whitespace yields an empty Slice.
        """
        return Slice.new(self.text.split()).map_to(String.new)

    def fields_func(self, f: Callable[[str], bool]) -> Slice[String]:
        """
        Split at each run of characters satisfying ``f``.

        If every character satisfies ``f``, or the string is empty, an empty
        Slice is returned.
        """
        return Slice.new(_fields_func(self.text, f)).map_to(String.new)

    def fields_seq(self) -> Iterator[String]:
        """Lazily yield the pieces :meth:`fields` would return."""
        return (String.new(m.group()) for m in _WHITESPACE_RUN.finditer(self.text))

    def fields_func_seq(self, f: Callable[[str], bool]) -> Iterator[String]:
        """Lazily yield the pieces :meth:`fields_func` would return."""
        return (String.new(field) for field in _fields_func(self.text, f))

    def lines(self) -> Iterator[String]:
        """
        Lazily yield the newline-terminated lines of the string.

        Each yielded line keeps its ``"\\n"``. An empty string yields no lines,
        and a final line without a terminator is yielded as is. The returned
        iterator is single-use.
        """
        return (String.new(line) for line in _lines(self.text))

    def split(self, sep: str) -> Slice[String]:
        """
        Split into all substrings separated by ``sep``.

        If ``sep`` does not occur (and is not empty) the result holds the
        whole string. An empty ``sep`` splits after every character, and an
        empty string split by an empty ``sep`` gives an empty Slice.
        Equivalent to ``split_n(sep, -1)``.
        """
        return self.split_n(sep, -1)

    def split_after(self, sep: str) -> Slice[String]:
        """
        Split after each instance of ``sep``, keeping ``sep`` on the pieces.

        Edge cases follow :meth:`split`. Equivalent to
        ``split_after_n(sep, -1)``.
        """
        return self.split_after_n(sep, -1)

    def split_n(self, sep: str, n: int) -> Slice[String]:
        """
        Split around ``sep`` into at most ``n`` substrings.

        - ``n > 0``: at most ``n`` pieces, the last holding the unsplit
          remainder;
        - ``n == 0``: an empty Slice;
        - ``n < 0``: every piece.
        """
        if n == 0:
            return Slice.new([])
        if not sep:
            return Slice.new(_explode(self.text, n)).map_to(String.new)
        return Slice.new(self.text.split(sep, n - 1 if n > 0 else -1)).map_to(
            String.new
        )

    def split_after_n(self, sep: str, n: int) -> Slice[String]:
        """Like :meth:`split_n`, keeping ``sep`` at the end of each piece."""
        if n == 0:
            return Slice.new([])
        if not sep:
            return Slice.new(_explode(self.text, n)).map_to(String.new)
        parts = self.text.split(sep, n - 1 if n > 0 else -1)
        pieces = [part + sep for part in parts[:-1]] + parts[-1:]
        return Slice.new(pieces).map_to(String.new)

    def split_seq(self, sep: str) -> Iterator[String]:
        """Lazily yield the pieces :meth:`split` would return. Single-use."""
        return (String.new(piece) for piece in _split(self.text, sep, keep=False))

    def split_after_seq(self, sep: str) -> Iterator[String]:
        """Lazily yield the pieces :meth:`split_after` would return. Single-use."""
        return (String.new(piece) for piece in _split(self.text, sep, keep=True))

    # Transforms

    def join(self, elems: Iterable[object]) -> String:
        """
        Stringify each element and join them using this string as separator.

        Works like ``str.join`` but accepts any objects, including a Slice.
        """
        return String.new(self.text.join(str(elem) for elem in elems))

    def map(self, mapping: Callable[[str], str | None]) -> String:
        """
        Return a copy with every character passed through ``mapping``.

        A character is dropped when ``mapping`` returns None.
        """
        mapped = (mapping(char) for char in self.text)
        return String.new("".join(char for char in mapped if char is not None))

    def repeat(self, count: int) -> String:
        """
        Return ``count`` copies of the string concatenated.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"negative repeat count: {count}")
        return String.new(self.text * count)

    def replace(self, old: str, new: str, n: int) -> String:
        """
        Replace the first ``n`` non-overlapping instances of ``old`` by ``new``.

        A negative ``n`` replaces every instance. An empty ``old`` matches at
        the start and after each character.
        """
        return String.new(self.text.replace(old, new, n if n >= 0 else -1))

    def replace_all(self, old: str, new: str) -> String:
        """Equivalent to ``replace(old, new, -1)``."""
        return self.replace(old, new, -1)

    def to_lower(self) -> String:
        return String.new(self.text.lower())

    def to_lower_special(self, case: SpecialCase) -> String:
        """Lower-case the string, giving priority to the overrides in ``case``."""
        return String.new("".join(case.to_lower(char) for char in self.text))

    def to_title(self) -> String:
        """Map every character to its Unicode title case."""
        return String.new("".join(char.title() for char in self.text))

    def to_title_special(self, case: SpecialCase) -> String:
        return String.new("".join(case.to_title(char) for char in self.text))

    def to_upper(self) -> String:
        return String.new(self.text.upper())

    def to_upper_special(self, case: SpecialCase) -> String:
        """Upper-case the string, giving priority to the overrides in ``case``."""
        return String.new("".join(case.to_upper(char) for char in self.text))

    def to_valid_utf8(self, replacement: str) -> String:
        """
        Replace each run of lone surrogates by ``replacement``.

        Lone surrogates are the only code points a ``str`` can hold that
        have no UTF-8 encoding. ``replacement`` may be empty.
        """
        cleaned, replaced = _SURROGATE_RUN.subn(replacement, self.text)
        if replaced:
            logger.debug("Replaced %d invalid code point run(s)", replaced)
        return String.new(cleaned)

    def trim(self, cutset: str) -> String:
        """Remove all leading and trailing characters contained in ``cutset``."""
        return String.new(self.text.strip(cutset))

    def trim_func(self, f: Callable[[str], bool]) -> String:
        return self.trim_left_func(f).trim_right_func(f)

    def trim_left(self, cutset: str) -> String:
        return String.new(self.text.lstrip(cutset))

    def trim_left_func(self, f: Callable[[str], bool]) -> String:
        """Remove all leading characters satisfying ``f``."""
        start = _first_index(self.text, f, truth=False)
        return String.new("" if start < 0 else self.text[start:])

    def trim_prefix(self, prefix: str) -> String:
        """Remove ``prefix`` if present, otherwise return the string as is."""
        return String.new(self.text.removeprefix(prefix))

    def trim_right(self, cutset: str) -> String:
        return String.new(self.text.rstrip(cutset))

    def trim_right_func(self, f: Callable[[str], bool]) -> String:
        """Remove all trailing characters satisfying ``f``."""
        end = _last_index(self.text, f, truth=False)
        return String.new(self.text[: end + 1])

    def trim_space(self) -> String:
        """Remove leading and trailing Unicode whitespace."""
        return String.new(self.text.strip())

    def trim_suffix(self, suffix: str) -> String:
        """Remove ``suffix`` if present, otherwise return the string as is."""
        return String.new(self.text.removesuffix(suffix))


def _rune(r: str) -> str:
    if len(r) != 1:
        raise ValueError(f"expected a single character, got {r!r}")
    return r


def _ascii(c: int) -> str:
    if not 0 <= c < 128:
        raise ValueError(f"expected an ASCII code, got {c}")
    return chr(c)


def _first_index(text: str, f: Callable[[str], bool], truth: bool = True) -> int:
    return next((i for i, char in enumerate(text) if bool(f(char)) is truth), -1)


def _last_index(text: str, f: Callable[[str], bool], truth: bool = True) -> int:
    return next(
        (i for i in range(len(text) - 1, -1, -1) if bool(f(text[i])) is truth), -1
    )


def _fields_func(text: str, f: Callable[[str], bool]) -> Iterator[str]:
    for is_separator, run in groupby(text, key=lambda char: bool(f(char))):
        if not is_separator:
            yield "".join(run)


def _explode(text: str, n: int) -> list[str]:
    """Split ``text`` into at most ``n`` pieces of one character each."""
    if n < 0 or n > len(text):
        n = len(text)
    if n == 0:
        return []
    return list(text[: n - 1]) + [text[n - 1 :]]


def _split(text: str, sep: str, keep: bool) -> Iterator[str]:
    if not sep:
        yield from text
        return

    start = 0
    while True:
        position = text.find(sep, start)
        if position < 0:
            yield text[start:]
            return
        end = position + len(sep)
        yield text[start : end if keep else position]
        start = end


def _lines(text: str) -> Iterator[str]:
    start = 0
    while start < len(text):
        end = text.find("\n", start) + 1 or len(text)
        yield text[start:end]
        start = end

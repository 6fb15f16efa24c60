"""
Immutable text values for klassy.

String wraps a native ``str`` and exposes trimming, searching, splitting,
case mapping and replacement as chainable methods that always return new
values. SpecialCase, with the predefined TURKISH and AZERI rules, customises
the ``*_special`` case conversions.
"""

from .special_case import AZERI, TURKISH, SpecialCase
from .string import String

__all__: list[str] = ["String", "SpecialCase", "TURKISH", "AZERI"]

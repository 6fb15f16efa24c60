"""
Chainable wrappers over Python's native strings and lists.

klassy provides two small types:

- String: an immutable text value whose methods (trim, cut, split, replace,
  case mapping, ...) each return a new String.
- Slice: a mutable, generic sequence whose mutators work in place and
  return the instance, and whose copies never alias its storage.

Example:
    ```python
    from klassy import String

    words = String.new("  the quick  brown fox ").fields()
    words.map_to(String.to_upper).join("-").value()  # "THE-QUICK-BROWN-FOX"
    ```
"""

from klassy.collections import Slice, map_to
from klassy.strings import AZERI, TURKISH, SpecialCase, String

__all__: list[str] = ["String", "Slice", "SpecialCase", "TURKISH", "AZERI", "map_to"]

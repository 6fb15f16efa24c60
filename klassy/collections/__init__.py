"""
Mutable sequence collections for klassy.

The primary collection is Slice, a generic wrapper over a native list whose
mutators work in place and return the instance so calls can be chained.
Copies taken with ``items()`` or ``clone()`` never share storage with the
original, so a Slice can be handed out and modified independently.
"""

from .map_to import map_to
from .slice import Slice

__all__: list[str] = ["Slice", "map_to"]

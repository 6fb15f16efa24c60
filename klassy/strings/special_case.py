"""
Language-specific case mappings for the klassy String type.

Python's ``str.upper``/``str.lower`` apply the locale-independent Unicode
mappings. A handful of languages override those mappings for a few
characters, the best known being Turkish and Azeri, where the dotted and
dotless ``i`` pair up differently. A SpecialCase describes such overrides and
falls back to the standard Unicode behaviour for every other character.
"""

from __future__ import annotations

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field


class SpecialCase(BaseModel):
    """
    Per-character case mapping overrides.

    Each mapping goes from a single character to its replacement. Characters
    that do not appear in a mapping are converted with the standard Unicode
    rules.

    Attributes:
        upper: Overrides used when converting to upper case.
        lower: Overrides used when converting to lower case.
        title: Overrides used when converting to title case.

    Example:
        ```python
        from klassy import String, TURKISH

        String.new("istanbul").to_upper_special(TURKISH).value()  # "İSTANBUL"
        ```
    """

    upper: dict[str, str] = Field(
        default_factory=dict,
        description="Upper case overrides, keyed by source character",
    )

    lower: dict[str, str] = Field(
        default_factory=dict,
        description="Lower case overrides, keyed by source character",
    )

    title: dict[str, str] = Field(
        default_factory=dict,
        description="Title case overrides, keyed by source character",
    )

    model_config = ConfigDict(frozen=True)

    def to_upper(self, char: str) -> str:
        if char in self.upper:
            return self.upper[char]
        return char.upper()

    def to_lower(self, char: str) -> str:
        if char in self.lower:
            return self.lower[char]
        return char.lower()

    def to_title(self, char: str) -> str:
        if char in self.title:
            return self.title[char]
        return char.title()


TURKISH = SpecialCase(
    upper={"i": "İ", "ı": "I"},
    lower={"I": "ı", "İ": "i"},
    title={"i": "İ", "ı": "I"},
)

AZERI = TURKISH

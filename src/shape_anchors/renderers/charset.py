"""Character sets for the node preview renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass
class Glyphs:
    outline: str
    vertex: str
    port: str
    center: str
    anchor: str
    reference: str

    @classmethod
    def unicode(cls) -> Glyphs:
        return cls(
            outline="·",
            vertex="•",
            port="○",
            center="┼",
            anchor="◆",
            reference="✕",
        )

    @classmethod
    def ascii(cls) -> Glyphs:
        return cls(
            outline=".",
            vertex="*",
            port="o",
            center="+",
            anchor="#",
            reference="x",
        )

    @classmethod
    def for_charset(cls, cs: CharSet) -> Glyphs:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()

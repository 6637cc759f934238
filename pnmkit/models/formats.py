"""Format identity — magic token, sample kind and raster encoding per Netpbm variant."""

from __future__ import annotations

import enum

from pnmkit.errors import UnsupportedMagicError


class SampleKind(enum.Enum):
    BIT = "bit"
    GRAY = "gray"
    RGB = "rgb"

    @property
    def channels(self) -> int:
        return 3 if self is SampleKind.RGB else 1

    @property
    def has_max_value(self) -> bool:
        return self is not SampleKind.BIT


class Format(enum.Enum):
    """One member per magic token. Value is the token itself."""

    P1 = "P1"  # bitmap, ASCII
    P2 = "P2"  # graymap, ASCII
    P3 = "P3"  # pixmap, ASCII
    P4 = "P4"  # bitmap, packed bits
    P5 = "P5"  # graymap, bytes
    P6 = "P6"  # pixmap, byte triplets

    @property
    def magic(self) -> str:
        return self.value

    @property
    def kind(self) -> SampleKind:
        return _KINDS[self]

    @property
    def is_binary(self) -> bool:
        return self in (Format.P4, Format.P5, Format.P6)

    @property
    def plain(self) -> Format:
        """ASCII encoding of the same sample kind."""
        return _PLAIN[self.kind]

    @property
    def raw(self) -> Format:
        """Binary encoding of the same sample kind."""
        return _RAW[self.kind]

    @classmethod
    def from_magic(cls, token: str) -> Format:
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMagicError(token) from None


_KINDS = {
    Format.P1: SampleKind.BIT,
    Format.P2: SampleKind.GRAY,
    Format.P3: SampleKind.RGB,
    Format.P4: SampleKind.BIT,
    Format.P5: SampleKind.GRAY,
    Format.P6: SampleKind.RGB,
}

_PLAIN = {SampleKind.BIT: Format.P1, SampleKind.GRAY: Format.P2, SampleKind.RGB: Format.P3}
_RAW = {SampleKind.BIT: Format.P4, SampleKind.GRAY: Format.P5, SampleKind.RGB: Format.P6}

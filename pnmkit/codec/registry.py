"""Codec registry — raster decoders and encoders registered per format via decorator.

Usage:
    @decoder(Format.P2)
    def decode_plain_graymap(header: Header, reader: TokenReader) -> NDArray:
        ...

Adding a format = one decoder and one encoder carrying the decorators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from pnmkit.models.formats import Format

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from pnmkit.codec.tokens import TokenReader
    from pnmkit.core.grid import Grid
    from pnmkit.models.header import Header

logger = logging.getLogger(__name__)

DecodeFn = Callable[["Header", "TokenReader"], "NDArray[Any]"]
EncodeFn = Callable[["Grid"], bytes]


@dataclass
class CodecRegistry:
    """Format → raster codec lookup."""

    _decoders: dict[Format, DecodeFn] = field(default_factory=dict)
    _encoders: dict[Format, EncodeFn] = field(default_factory=dict)

    def register_decoder(self, fmt: Format, fn: DecodeFn) -> None:
        if fmt in self._decoders:
            raise ValueError(f"Duplicate decoder for {fmt.magic}")
        self._decoders[fmt] = fn
        logger.debug("Registered decoder %s for %s", fn.__name__, fmt.magic)

    def register_encoder(self, fmt: Format, fn: EncodeFn) -> None:
        if fmt in self._encoders:
            raise ValueError(f"Duplicate encoder for {fmt.magic}")
        self._encoders[fmt] = fn
        logger.debug("Registered encoder %s for %s", fn.__name__, fmt.magic)

    def decoder(self, fmt: Format) -> DecodeFn:
        try:
            return self._decoders[fmt]
        except KeyError:
            raise NotImplementedError(f"No decoder registered for {fmt.magic}") from None

    def encoder(self, fmt: Format) -> EncodeFn:
        try:
            return self._encoders[fmt]
        except KeyError:
            raise NotImplementedError(f"No encoder registered for {fmt.magic}") from None

    def formats(self) -> list[Format]:
        """Formats with both a decoder and an encoder, in magic order."""
        both = set(self._decoders) & set(self._encoders)
        return sorted(both, key=lambda f: f.magic)


# Module-level singleton
_registry = CodecRegistry()


def get_registry() -> CodecRegistry:
    return _registry


def decoder(*formats: Format):
    """Decorator to register a raster decoder for one or more formats."""

    def decorate(fn: DecodeFn) -> DecodeFn:
        for fmt in formats:
            _registry.register_decoder(fmt, fn)
        return fn

    return decorate


def encoder(*formats: Format):
    """Decorator to register a raster encoder for one or more formats."""

    def decorate(fn: EncodeFn) -> EncodeFn:
        for fmt in formats:
            _registry.register_encoder(fmt, fn)
        return fn

    return decorate

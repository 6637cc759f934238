"""Parsed Netpbm header model."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from pnmkit.models.formats import Format

# Netpbm caps max value at 16 bits.
MAX_SAMPLE_LIMIT = 65535


class Header(BaseModel):
    """Magic, dimensions and (for gray/pixmap) the max sample value."""

    model_config = {"frozen": True}

    format: Format
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    max_value: int | None = Field(default=None, ge=1, le=MAX_SAMPLE_LIMIT)

    @model_validator(mode="after")
    def _check_max_value(self) -> Header:
        if self.format.kind.has_max_value and self.max_value is None:
            raise ValueError(f"{self.format.magic} header requires a max value")
        if not self.format.kind.has_max_value and self.max_value is not None:
            raise ValueError(f"{self.format.magic} header carries no max value")
        return self

    @property
    def sample_count(self) -> int:
        return self.width * self.height * self.format.kind.channels

    def to_bytes(self) -> bytes:
        text = f"{self.format.magic}\n{self.width} {self.height}\n"
        if self.max_value is not None:
            text += f"{self.max_value}\n"
        return text.encode("ascii")

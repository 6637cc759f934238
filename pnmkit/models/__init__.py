"""Format identity and header models."""

from pnmkit.models.formats import Format, SampleKind
from pnmkit.models.header import Header

__all__ = ["Format", "SampleKind", "Header"]

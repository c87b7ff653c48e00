"""
Shared value objects.

Immutable, validated domain primitives.
Following DDD value object pattern.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Symbology(str, Enum):
    """Barcode encodings the scanner accepts."""

    QR = "qr"
    EAN13 = "ean13"
    EAN8 = "ean8"
    UPC_E = "upc_e"
    UPC_A = "upc_a"
    CODE128 = "code128"

    @classmethod
    def parse(cls, raw: str | Symbology) -> Symbology:
        """
        Parse symbology name reported by a decoder.

        Accepts enum members, values ("ean13") and names ("EAN13"),
        case-insensitive.

        Raises:
            ValueError: If the symbology is not supported

        Example:
            >>> Symbology.parse("EAN13")
            <Symbology.EAN13: 'ean13'>
        """
        if isinstance(raw, Symbology):
            return raw
        key = str(raw).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unsupported symbology: {raw!r}")


class DecodedCode(BaseModel):
    """
    One decoded barcode reading.

    Produced once per accepted decode, consumed once by the
    product resolver.

    Example:
        >>> code = DecodedCode(symbology=Symbology.EAN13, payload="8886467124723")
        >>> assert str(code) == "8886467124723"
    """

    model_config = ConfigDict(frozen=True)

    symbology: Symbology = Field(..., description="Barcode encoding")
    payload: str = Field(..., min_length=1, description="Decoded content")

    @field_validator("symbology", mode="before")
    @classmethod
    def parse_symbology(cls, v: object) -> Symbology:
        """Accept decoder names as well as enum members."""
        return Symbology.parse(v)  # type: ignore[arg-type]

    @field_validator("payload")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Ensure not empty or whitespace."""
        if not v.strip():
            raise ValueError("Payload cannot be empty or whitespace")
        return v.strip()

    def __str__(self) -> str:
        """String representation."""
        return self.payload

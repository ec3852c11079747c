"""
Pydantic models for UPC-A records and encoded symbols.
"""

from upca.models.symbol import (
    CheckDigitMode,
    EncodedSymbol,
    ModuleRegion,
    UpcaRecord,
)

__all__ = [
    "CheckDigitMode",
    "EncodedSymbol",
    "ModuleRegion",
    "UpcaRecord",
]

"""
Value models for UPC-A records and encoded symbols.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CheckDigitMode(str, Enum):
    """Formula used for the check digit."""

    STANDARD = "standard"  # (10 - sum % 10) % 10
    LEGACY = "legacy"  # 10 - sum % 10, may produce 10


class UpcaRecord(BaseModel):
    """
    Logical UPC-A payload split into its digit groups.

    Constructed per encode call; never shared or mutated.
    """

    model_config = ConfigDict(frozen=True)

    number_system: str = Field(..., pattern=r"^[0-9]$", description="Number system digit")
    manufacturer_code: str = Field(..., pattern=r"^[0-9]{5}$", description="Manufacturer code")
    product_code: str = Field(..., pattern=r"^[0-9]{5}$", description="Product code")
    check_digit: str = Field(..., pattern=r"^[0-9]$", description="Check digit")

    @classmethod
    def from_digits(cls, digits: str) -> "UpcaRecord":
        """Split a 12-digit string into a record. Does not verify the checksum."""
        if len(digits) != 12:
            raise ValueError(f"Expected 12 digits, got {len(digits)}")
        return cls(
            number_system=digits[0],
            manufacturer_code=digits[1:6],
            product_code=digits[6:11],
            check_digit=digits[11],
        )

    @property
    def digits(self) -> str:
        """Full 12-digit code."""
        return f"{self.number_system}{self.manufacturer_code}{self.product_code}{self.check_digit}"

    @property
    def human_readable(self) -> str:
        """Digit groups as printed under the symbol."""
        return f"{self.number_system} {self.manufacturer_code} {self.product_code} {self.check_digit}"

    def to_ean13(self) -> str:
        """Convert to EAN-13 by adding a leading 0."""
        return "0" + self.digits


class ModuleRegion(BaseModel):
    """A contiguous segment of the flat module pattern."""

    model_config = ConfigDict(frozen=True)

    name: str
    start: int = Field(..., ge=0, description="Index of the first module")
    end: int = Field(..., ge=0, description="Index past the last module")
    digits: str | None = Field(None, description="Human-readable digits drawn under the region")
    full_height: bool = Field(True, description="Whether bars extend over the text line")

    @property
    def width(self) -> int:
        """Number of modules in the region."""
        return self.end - self.start


class EncodedSymbol(BaseModel):
    """
    Flat module pattern plus everything a renderer needs to draw it.

    Renderers place each digit group's text under its region without
    re-parsing the pattern.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., pattern=r"^[01]+$", description="Flat module string, '1' = bar")
    record: UpcaRecord
    regions: tuple[ModuleRegion, ...] = ()

    @property
    def number_system(self) -> str:
        """Number system digit."""
        return self.record.number_system

    @property
    def manufacturer_code(self) -> str:
        """Five-digit manufacturer code."""
        return self.record.manufacturer_code

    @property
    def product_code(self) -> str:
        """Five-digit product code."""
        return self.record.product_code

    @property
    def check_digit(self) -> str:
        """Check digit."""
        return self.record.check_digit

    @property
    def digits(self) -> str:
        """Full 12-digit code."""
        return self.record.digits

    @property
    def human_readable(self) -> str:
        """Digit groups as printed under the symbol."""
        return self.record.human_readable

    @property
    def text_regions(self) -> list[ModuleRegion]:
        """Regions that carry human-readable digits."""
        return [region for region in self.regions if region.digits is not None]

    def region(self, name: str) -> ModuleRegion:
        """Look up a region by name."""
        for region in self.regions:
            if region.name == name:
                return region
        raise KeyError(name)

    def bars(self) -> list[tuple[int, int]]:
        """
        Runs of black modules.

        Returns:
            List of (start, width) tuples in module units
        """
        runs: list[tuple[int, int]] = []
        start = None
        for i, module in enumerate(self.pattern):
            if module == "1" and start is None:
                start = i
            elif module == "0" and start is not None:
                runs.append((start, i - start))
                start = None
        if start is not None:
            runs.append((start, len(self.pattern) - start))
        return runs

"""Header-level models: run metadata and output schema declarations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from varianteffect.constants import (
    OUTPUT_VCF_HEADER_COMMAND_LINE_KEY,
    OUTPUT_VCF_HEADER_VERSION_LINE_KEY,
)


class HeaderLine(BaseModel):
    """A ``##key=value`` header line."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    def __str__(self) -> str:
        return f"##{self.key}={self.value}"


class RunMetadata(BaseModel):
    """SnpEff version and command line, read once from the input header."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Raw SnpEffVersion header value")
    command_line: str = Field(..., description="Raw SnpEffCmd header value")

    def output_header_lines(self) -> list[HeaderLine]:
        """The two header lines echoed into our output under renamed keys."""
        return [
            HeaderLine(key=OUTPUT_VCF_HEADER_VERSION_LINE_KEY, value=self.version),
            HeaderLine(key=OUTPUT_VCF_HEADER_COMMAND_LINE_KEY, value=self.command_line),
        ]


class InfoFieldDescription(BaseModel):
    """Declaration of one INFO field we may emit."""

    model_config = ConfigDict(frozen=True)

    id: str
    number: int = 1
    type: Literal["String"] = "String"
    description: str

    def __str__(self) -> str:
        return f'##INFO=<ID={self.id},Number={self.number},Type={self.type},Description="{self.description}">'

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# (display name, OCR.space language code)
LANGUAGES: list[tuple[str, str]] = [
    ("Auto-detect (Engine 2 only)", "auto"),
    ("Arabic", "ara"),
    ("Bulgarian", "bul"),
    ("Chinese (Simplified)", "chs"),
    ("Chinese (Traditional)", "cht"),
    ("Croatian", "hrv"),
    ("Czech", "cze"),
    ("Danish", "dan"),
    ("Dutch", "dut"),
    ("English", "eng"),
    ("Finnish", "fin"),
    ("French", "fre"),
    ("German", "ger"),
    ("Greek", "gre"),
    ("Hungarian", "hun"),
    ("Italian", "ita"),
    ("Japanese", "jpn"),
    ("Korean", "kor"),
    ("Polish", "pol"),
    ("Portuguese", "por"),
    ("Russian", "rus"),
    ("Slovenian", "slv"),
    ("Spanish", "spa"),
    ("Swedish", "swe"),
    ("Turkish", "tur"),
]

Language = Literal[
    "auto", "ara", "bul", "chs", "cht", "hrv", "cze", "dan", "dut", "eng", "fin", "fre", "ger",
    "gre", "hun", "ita", "jpn", "kor", "pol", "por", "rus", "slv", "spa", "swe", "tur",
]
OCREngineCode = Literal["1", "2"]


class AdditionalOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    detect_orientation: bool = False
    is_overlay_required: bool = False
    scale: bool = False
    is_table: bool = False


class NodeParameters(BaseModel):
    """User-facing configuration of the node, as set in the workflow editor."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    binary_property_name: str = Field(default="data", min_length=1)
    language: Language = "auto"
    ocr_engine: OCREngineCode = Field(default="2", alias="OCREngine")
    additional_options: AdditionalOptions = Field(default_factory=AdditionalOptions)


@dataclass(frozen=True)
class OCRRequestOptions:
    language: str = "auto"
    engine: str = "2"
    detect_orientation: bool = False
    is_overlay_required: bool = False
    scale: bool = False
    is_table: bool = False

    @classmethod
    def from_parameters(cls, parameters: NodeParameters) -> "OCRRequestOptions":
        opts = parameters.additional_options
        return cls(
            language=parameters.language,
            engine=parameters.ocr_engine,
            detect_orientation=opts.detect_orientation,
            is_overlay_required=opts.is_overlay_required,
            scale=opts.scale,
            is_table=opts.is_table,
        )

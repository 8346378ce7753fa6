from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Workflow items
# ---------------------------------------------------------------------------

class BinaryData(_CamelModel):
    """One named attachment on an item. ``data`` holds the base64 file bytes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    data: str
    mime_type: str | None = None
    file_name: str | None = None
    file_extension: str | None = None
    file_size: str | int | None = None

    def content(self) -> bytes:
        return base64.b64decode(self.data, validate=True)


class PairedItem(_CamelModel):
    item: int


class NodeExecutionData(_CamelModel):
    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: dict[str, BinaryData] | None = None
    paired_item: PairedItem | None = None

    def dump(self) -> dict[str, Any]:
        out: dict[str, Any] = {"json": self.json_data}
        if self.binary is not None:
            out["binary"] = {
                name: payload.model_dump(by_alias=True, exclude_unset=True)
                for name, payload in self.binary.items()
            }
        if self.paired_item is not None:
            out["pairedItem"] = self.paired_item.model_dump(by_alias=True)
        return out


# ---------------------------------------------------------------------------
# OCR.space response
# ---------------------------------------------------------------------------

def is_success_exit_code(value: Any) -> bool:
    """Only the integer 1 means success; bools, strings and floats do not."""
    return type(value) is int and value == 1


def error_messages_from(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


class TextOverlay(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    lines: list[dict[str, Any]] | None = Field(default=None, alias="Lines")
    has_overlay: bool | None = Field(default=None, alias="HasOverlay")
    message: str | None = Field(default=None, alias="Message")


class ParsedResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    parsed_text: str | None = Field(default=None, alias="ParsedText")
    text_orientation: str | int | None = Field(default=None, alias="TextOrientation")
    file_parse_exit_code: int | str | None = Field(default=None, alias="FileParseExitCode")
    error_message: str | list[str] | None = Field(default=None, alias="ErrorMessage")
    error_details: str | None = Field(default=None, alias="ErrorDetails")
    text_overlay: TextOverlay | None = Field(default=None, alias="TextOverlay")


class OCRSpaceResponse(BaseModel):
    """Parsed body of a ``/parse/image`` call.

    ``OCRExitCode == 1`` is the only success signal; the HTTP status is 200
    for most failures too.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    ocr_exit_code: Any = Field(default=None, alias="OCRExitCode")
    is_errored_on_processing: bool | None = Field(default=None, alias="IsErroredOnProcessing")
    error_message: list[str] = Field(default_factory=list, alias="ErrorMessage")
    error_details: str | None = Field(default=None, alias="ErrorDetails")
    parsed_results: list[ParsedResult] = Field(default_factory=list, alias="ParsedResults")
    processing_time_in_milliseconds: str | int | float | None = Field(
        default=None, alias="ProcessingTimeInMilliseconds"
    )
    searchable_pdf_url: str | None = Field(default=None, alias="SearchablePDFURL")

    @field_validator("error_message", mode="before")
    @classmethod
    def _coerce_error_message(cls, value: Any) -> list[str]:
        return error_messages_from(value)

    @field_validator("parsed_results", mode="before")
    @classmethod
    def _coerce_parsed_results(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def succeeded(self) -> bool:
        return is_success_exit_code(self.ocr_exit_code)

    @property
    def first_page(self) -> ParsedResult | None:
        return self.parsed_results[0] if self.parsed_results else None


# ---------------------------------------------------------------------------
# API payloads
# ---------------------------------------------------------------------------

class ExecuteRequest(_CamelModel):
    items: list[NodeExecutionData]
    parameters: dict[str, Any] = Field(default_factory=dict)
    continue_on_fail: bool | None = None


class ExecuteResponse(BaseModel):
    items: list[dict[str, Any]]


class NodeErrorResponse(_CamelModel):
    message: str
    item_index: int | None = None


class CredentialTestRequest(_CamelModel):
    api_key: str | None = None


class CredentialTestResponse(BaseModel):
    status: str  # OK | Error
    message: str

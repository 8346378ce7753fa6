"""Shared pytest configuration and fixtures for the OCR.space node tests."""
from __future__ import annotations

import base64
import os

# Provide required env vars before any ocrspace_node module is imported
os.environ.setdefault("OCR_PROVIDER", "mock")
os.environ.setdefault("OCRSPACE_API_KEY", "test-api-key")
os.environ.setdefault("OCRSPACE_ENDPOINT", "https://api.ocr.space/parse/image")

import pytest  # noqa: E402

from ocrspace_node.schemas import BinaryData, NodeExecutionData  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def make_item(
    json_data: dict | None = None,
    *,
    prop: str = "data",
    file_name: str | None = "receipt.png",
    file_extension: str | None = "png",
    content: bytes = PNG_BYTES,
) -> NodeExecutionData:
    return NodeExecutionData(
        json=json_data or {},
        binary={
            prop: BinaryData(
                data=base64.b64encode(content).decode("ascii"),
                mime_type="image/png",
                file_name=file_name,
                file_extension=file_extension,
            )
        },
    )


def ocr_success(*texts: str, overlay_lines: list | None = None) -> dict:
    pages = []
    for text in texts:
        pages.append(
            {
                "ParsedText": text,
                "TextOrientation": "0",
                "FileParseExitCode": 1,
                "ErrorMessage": "",
                "ErrorDetails": "",
            }
        )
    if overlay_lines is not None and pages:
        pages[0]["TextOverlay"] = {"Lines": overlay_lines, "HasOverlay": True, "Message": ""}
    return {
        "ParsedResults": pages,
        "OCRExitCode": 1,
        "IsErroredOnProcessing": False,
        "ProcessingTimeInMilliseconds": "312",
    }


@pytest.fixture
def item() -> NodeExecutionData:
    return make_item({"id": 1})

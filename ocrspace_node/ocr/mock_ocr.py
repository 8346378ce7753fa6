from __future__ import annotations

from typing import Any

from ocrspace_node.ocr.base_ocr import OCRForm, OCRTransport


class MockOCRTransport(OCRTransport):
    async def parse_image(self, form: OCRForm) -> dict[str, Any]:
        # Mock OCR.space response for development/testing
        response: dict[str, Any] = {
            "ParsedResults": [
                {
                    "TextOverlay": {"Lines": [], "HasOverlay": False, "Message": "Text overlay is not provided as it is not requested"},
                    "TextOrientation": "0",
                    "FileParseExitCode": 1,
                    "ParsedText": f"INVOICE\r\nFile: {form.file_name}\r\nTotal: $300.00\r\n",
                    "ErrorMessage": "",
                    "ErrorDetails": "",
                }
            ],
            "OCRExitCode": 1,
            "IsErroredOnProcessing": False,
            "ProcessingTimeInMilliseconds": "42",
            "SearchablePDFURL": "Searchable PDF not generated as it was not requested.",
        }
        if form.fields.get("isOverlayRequired") == "true":
            response["ParsedResults"][0]["TextOverlay"] = {
                "Lines": [
                    {
                        "LineText": "INVOICE",
                        "Words": [{"WordText": "INVOICE", "Left": 10, "Top": 12, "Height": 20, "Width": 90}],
                        "MaxHeight": 20,
                        "MinTop": 12,
                    }
                ],
                "HasOverlay": True,
                "Message": "Total lines: 1",
            }
        return response

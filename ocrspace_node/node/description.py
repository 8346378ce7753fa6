"""Static node metadata shown by workflow editors (names, defaults, help text)."""
from __future__ import annotations

from typing import Any

from ocrspace_node.node.parameters import LANGUAGES

NODE_DESCRIPTION: dict[str, Any] = {
    "displayName": "OCR.space",
    "name": "ocrSpace",
    "group": ["transform"],
    "version": 1,
    "subtitle": "Extract text from images",
    "description": "Extract text from images using OCR.space API",
    "defaults": {"name": "OCR.space"},
    "credentials": [{"name": "ocrSpaceApi", "required": True}],
    "properties": [
        {
            "displayName": "Binary Property",
            "name": "binaryPropertyName",
            "type": "string",
            "default": "data",
            "required": True,
            "description": "Name of the binary property containing the image to OCR",
        },
        {
            "displayName": "Language",
            "name": "language",
            "type": "options",
            "options": [{"name": name, "value": value} for name, value in LANGUAGES],
            "default": "auto",
            "description": "Language to use for OCR",
        },
        {
            "displayName": "OCR Engine",
            "name": "OCREngine",
            "type": "options",
            "options": [
                {"name": "Engine 1", "value": "1", "description": "Default OCR engine"},
                {
                    "name": "Engine 2",
                    "value": "2",
                    "description": "Alternative OCR engine (better for certain image types)",
                },
            ],
            "default": "2",
            "description": "OCR engine to use for text extraction",
        },
        {
            "displayName": "Additional Options",
            "name": "additionalOptions",
            "type": "collection",
            "placeholder": "Add Option",
            "default": {},
            "options": [
                {
                    "displayName": "Detect Orientation",
                    "name": "detectOrientation",
                    "type": "boolean",
                    "default": False,
                    "description": "Whether to automatically detect and correct image orientation",
                },
                {
                    "displayName": "Get Word Coordinates",
                    "name": "isOverlayRequired",
                    "type": "boolean",
                    "default": False,
                    "description": "Whether to return word-level bounding box coordinates",
                },
                {
                    "displayName": "Scale Image",
                    "name": "scale",
                    "type": "boolean",
                    "default": False,
                    "description": "Whether to scale the image for better OCR accuracy",
                },
                {
                    "displayName": "Table Mode",
                    "name": "isTable",
                    "type": "boolean",
                    "default": False,
                    "description": (
                        "Whether to optimize OCR for tables, receipts, and structured documents "
                        "with line-by-line text parsing"
                    ),
                },
            ],
        },
    ],
}

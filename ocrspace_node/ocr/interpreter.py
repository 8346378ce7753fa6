"""Turn an OCR.space response body into an output record."""
from __future__ import annotations

import logging
from typing import Any

from ocrspace_node.core.errors import OCRServiceError
from ocrspace_node.node.parameters import OCRRequestOptions
from ocrspace_node.schemas import (
    NodeExecutionData,
    OCRSpaceResponse,
    PairedItem,
    error_messages_from,
    is_success_exit_code,
)

logger = logging.getLogger(__name__)


def interpret_response(
    response: dict[str, Any],
    item: NodeExecutionData,
    item_index: int,
    options: OCRRequestOptions,
) -> NodeExecutionData:
    """Build the output record for *item*, or raise ``OCRServiceError``.

    Only the first page's orientation, parse exit code and overlay are
    surfaced, however many pages the service returns.
    """
    # Checked on the raw body so a malformed page list cannot mask the service error
    exit_code = response.get("OCRExitCode")
    if not is_success_exit_code(exit_code):
        raise OCRServiceError(
            error_messages_from(response.get("ErrorMessage")),
            exit_code=exit_code,
            item_index=item_index,
        )

    parsed = OCRSpaceResponse.model_validate(response)

    extracted_text = "\n\n".join(
        page.parsed_text or "" for page in parsed.parsed_results
    ).strip()

    first = parsed.first_page
    json_data: dict[str, Any] = {
        **item.json_data,
        "extractedText": extracted_text,
        "ocrResults": {
            "fullResponse": response,
            "processingTimeInMilliseconds": parsed.processing_time_in_milliseconds,
            "textOrientation": first.text_orientation if first else None,
            "fileParseExitCode": first.file_parse_exit_code if first else None,
        },
    }

    if options.is_overlay_required and first is not None and first.text_overlay is not None:
        if first.text_overlay.lines is not None:
            json_data["wordCoordinates"] = first.text_overlay.lines

    logger.debug(
        "ocr_response_interpreted",
        extra={
            "item_index": item_index,
            "pages": len(parsed.parsed_results),
            "text_length": len(extracted_text),
        },
    )

    return NodeExecutionData(
        json=json_data,
        binary=item.binary,
        paired_item=PairedItem(item=item_index),
    )

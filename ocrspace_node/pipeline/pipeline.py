"""Processing pipeline — runs build → call → interpret for every input item.

Items are processed strictly in order, one remote call at a time. With
``continue_on_fail`` an item's failure becomes an ``error`` field on its
output record; without it the first failure aborts the run.
"""
from __future__ import annotations

import logging
import time

from ocrspace_node.core.errors import NodeOperationError
from ocrspace_node.node.parameters import NodeParameters, OCRRequestOptions
from ocrspace_node.ocr.base_ocr import OCRTransport
from ocrspace_node.ocr.interpreter import interpret_response
from ocrspace_node.ocr.request_builder import build_ocr_form
from ocrspace_node.schemas import NodeExecutionData, PairedItem

logger = logging.getLogger(__name__)


class OcrSpaceNode:
    def __init__(self, transport: OCRTransport) -> None:
        self._transport = transport

    # ------------------------------------------------------------------ #
    #  Public entry point                                                  #
    # ------------------------------------------------------------------ #

    async def execute(
        self,
        items: list[NodeExecutionData],
        parameters: NodeParameters,
        *,
        continue_on_fail: bool = False,
    ) -> list[NodeExecutionData]:
        logger.info(
            "ocrspace_execute",
            extra={"item_count": len(items), "continue_on_fail": continue_on_fail},
        )
        options = OCRRequestOptions.from_parameters(parameters)
        return_data: list[NodeExecutionData] = []

        for index, item in enumerate(items):
            try:
                record = await self._process_item(
                    item, index, parameters.binary_property_name, options
                )
            except Exception as exc:
                if continue_on_fail:
                    message = exc.message if isinstance(exc, NodeOperationError) else str(exc)
                    logger.warning(
                        "item_failed_continuing",
                        extra={"item_index": index, "error": message},
                    )
                    return_data.append(
                        NodeExecutionData(
                            json={**item.json_data, "error": message},
                            binary=item.binary,
                            paired_item=PairedItem(item=index),
                        )
                    )
                    continue

                logger.exception("item_failed", extra={"item_index": index})
                if isinstance(exc, NodeOperationError):
                    raise exc.with_item_index(index)
                raise NodeOperationError(str(exc), item_index=index) from exc

            return_data.append(record)

        return return_data

    # ------------------------------------------------------------------ #
    #  Per-item steps                                                      #
    # ------------------------------------------------------------------ #

    async def _process_item(
        self,
        item: NodeExecutionData,
        index: int,
        binary_property_name: str,
        options: OCRRequestOptions,
    ) -> NodeExecutionData:
        form = build_ocr_form(item, index, binary_property_name, options)
        logger.info(
            "uploading_file_for_ocr",
            extra={"item_index": index, "upload_filename": form.file_name},
        )

        t0 = time.monotonic()
        response = await self._transport.parse_image(form)
        duration_ms = int((time.monotonic() - t0) * 1000)
        logger.info(
            "ocr_call_complete",
            extra={"item_index": index, "duration_ms": duration_ms},
        )

        return interpret_response(response, item, index, options)

from __future__ import annotations

import base64
import logging
from typing import Any

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from pydantic import SecretStr, ValidationError

from ocrspace_node.core.config import settings
from ocrspace_node.credentials.ocrspace_api import OcrSpaceApiCredentials
from ocrspace_node.node.description import NODE_DESCRIPTION
from ocrspace_node.node.parameters import NodeParameters
from ocrspace_node.ocr.factory import get_ocr_transport
from ocrspace_node.ocr.ocrspace import OCRSpaceTransport
from ocrspace_node.pipeline.pipeline import OcrSpaceNode
from ocrspace_node.schemas import (
    BinaryData,
    CredentialTestRequest,
    CredentialTestResponse,
    ExecuteRequest,
    ExecuteResponse,
    NodeExecutionData,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_parameters(raw: dict[str, Any]) -> NodeParameters:
    try:
        return NodeParameters.model_validate(raw)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc


def _credential_transport(credentials: OcrSpaceApiCredentials) -> OCRSpaceTransport:
    # The credential test always talks to OCR.space, whatever OCR_PROVIDER says
    return OCRSpaceTransport(
        credentials,
        endpoint=settings.ocrspace_endpoint,
        timeout=settings.request_timeout_seconds,
    )


async def _run(
    items: list[NodeExecutionData], parameters: NodeParameters, continue_on_fail: bool
) -> list[NodeExecutionData]:
    try:
        transport = get_ocr_transport()
    except ValueError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    try:
        node = OcrSpaceNode(transport)
        return await node.execute(items, parameters, continue_on_fail=continue_on_fail)
    finally:
        await transport.aclose()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/node/description")
async def node_description() -> dict[str, Any]:
    return NODE_DESCRIPTION


@router.post("/node/execute", response_model=ExecuteResponse)
async def execute_node(request: ExecuteRequest) -> ExecuteResponse:
    parameters = _parse_parameters(request.parameters)
    continue_on_fail = (
        settings.continue_on_fail if request.continue_on_fail is None else request.continue_on_fail
    )
    records = await _run(request.items, parameters, continue_on_fail)
    return ExecuteResponse(items=[record.dump() for record in records])


@router.post("/ocr/upload")
async def upload_image(
    file: UploadFile = File(...),
    language: str = Form("auto"),
    ocr_engine: str = Form("2", alias="OCREngine"),
    detect_orientation: bool = Form(False, alias="detectOrientation"),
    is_overlay_required: bool = Form(False, alias="isOverlayRequired"),
    scale: bool = Form(False),
    is_table: bool = Form(False, alias="isTable"),
) -> dict[str, Any]:
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty upload")

    parameters = _parse_parameters(
        {
            "language": language,
            "OCREngine": ocr_engine,
            "additionalOptions": {
                "detectOrientation": detect_orientation,
                "isOverlayRequired": is_overlay_required,
                "scale": scale,
                "isTable": is_table,
            },
        }
    )

    extension = None
    if file.filename and "." in file.filename:
        extension = file.filename.rsplit(".", 1)[-1].lower()

    item = NodeExecutionData(
        json={},
        binary={
            parameters.binary_property_name: BinaryData(
                data=base64.b64encode(content).decode("ascii"),
                mime_type=file.content_type or "application/octet-stream",
                file_name=file.filename or None,
                file_extension=extension,
                file_size=len(content),
            )
        },
    )
    records = await _run([item], parameters, continue_on_fail=False)

    logger.info("image_uploaded", extra={"upload_filename": file.filename})
    return records[0].dump()


@router.post("/credentials/test", response_model=CredentialTestResponse)
async def test_credentials(request: CredentialTestRequest) -> CredentialTestResponse:
    api_key = SecretStr(request.api_key) if request.api_key else settings.ocrspace_api_key
    if api_key is None:
        raise HTTPException(status_code=400, detail="No API key supplied or configured")

    credentials = OcrSpaceApiCredentials(api_key=api_key)
    transport = _credential_transport(credentials)
    try:
        result = await credentials.test(transport)
    finally:
        await transport.aclose()
    return CredentialTestResponse(status=result.status, message=result.message)

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ocrspace_node.api.routes import router
from ocrspace_node.core.config import settings
from ocrspace_node.core.errors import NodeOperationError, OCRTransportError
from ocrspace_node.core.logging import configure_logging
from ocrspace_node.schemas import NodeErrorResponse


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="OCR.space Node", version="0.1.0")
    app.include_router(router)

    @app.get("/")
    async def root():
        return {
            "message": "OCR.space workflow node",
            "docs": "/docs",
            "health": "/health",
        }

    @app.exception_handler(OCRTransportError)
    async def _transport_error(request: Request, exc: OCRTransportError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content=NodeErrorResponse(message=exc.message, item_index=exc.item_index).model_dump(
                by_alias=True
            ),
        )

    @app.exception_handler(NodeOperationError)
    async def _node_error(request: Request, exc: NodeOperationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=NodeErrorResponse(message=exc.message, item_index=exc.item_index).model_dump(
                by_alias=True
            ),
        )

    @app.on_event("startup")
    async def _startup() -> None:
        logging.getLogger(__name__).info(
            "startup", extra={"ocr_provider": settings.ocr_provider, "app_env": settings.app_env}
        )

    return app


app = create_app()

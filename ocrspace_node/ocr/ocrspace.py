"""OCRSpaceTransport: authenticated POST to the OCR.space ``/parse/image`` endpoint."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ocrspace_node.core.errors import OCRTransportError
from ocrspace_node.ocr.base_ocr import OCRForm, OCRTransport

if TYPE_CHECKING:
    from ocrspace_node.credentials.ocrspace_api import OcrSpaceApiCredentials

logger = logging.getLogger(__name__)

OCRSPACE_ENDPOINT = "https://api.ocr.space/parse/image"


class OCRSpaceTransport(OCRTransport):
    """Sends one multipart request per call. No retries.

    Config (via .env):
        OCR_PROVIDER=ocrspace
        OCRSPACE_API_KEY=...
        OCRSPACE_ENDPOINT=https://api.ocr.space/parse/image
        REQUEST_TIMEOUT_SECONDS=60
    """

    def __init__(
        self,
        credentials: "OcrSpaceApiCredentials",
        *,
        endpoint: str = OCRSPACE_ENDPOINT,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._credentials = credentials
        self._endpoint = endpoint
        self._timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def parse_image(self, form: OCRForm) -> dict[str, Any]:
        data, files = form.to_httpx()
        logger.info(
            "ocrspace_upload",
            extra={"upload_filename": form.file_name, "size_bytes": len(form.content)},
        )
        return await self.post(data, files=files)

    async def post(
        self,
        data: dict[str, str],
        *,
        files: dict[str, tuple[str, bytes, str]] | None = None,
    ) -> dict[str, Any]:
        client = self._get_client()
        try:
            response = await client.post(
                self._endpoint,
                data=data,
                files=files,
                headers=self._credentials.authenticate(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise OCRTransportError(
                f"OCR.space request failed with HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise OCRTransportError(f"OCR.space request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise OCRTransportError(
                "OCR.space returned a body that is not valid JSON",
                status_code=response.status_code,
            ) from exc

        if not isinstance(body, dict):
            # The service reports some errors (e.g. rate limits) as a bare JSON string
            raise OCRTransportError(
                f"OCR.space returned an unexpected response: {body}",
                status_code=response.status_code,
            )
        return body

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

from __future__ import annotations

from ocrspace_node.core.config import settings
from ocrspace_node.credentials.ocrspace_api import OcrSpaceApiCredentials
from ocrspace_node.ocr.base_ocr import OCRTransport
from ocrspace_node.ocr.mock_ocr import MockOCRTransport


def get_ocr_transport(credentials: OcrSpaceApiCredentials | None = None) -> OCRTransport:
    """Return the configured OCR transport instance.

    OCR_PROVIDER options:
        ocrspace — OCRSpaceTransport (needs an API key, from *credentials* or OCRSPACE_API_KEY)
        mock     — canned OCR.space response (dev/test, no network)
    """
    provider = settings.ocr_provider.lower().strip()

    if provider == "mock":
        return MockOCRTransport()

    if provider == "ocrspace":
        from ocrspace_node.ocr.ocrspace import OCRSpaceTransport

        if credentials is None:
            if settings.ocrspace_api_key is None:
                raise ValueError("OCRSPACE_API_KEY is required when OCR_PROVIDER=ocrspace")
            credentials = OcrSpaceApiCredentials(api_key=settings.ocrspace_api_key)
        return OCRSpaceTransport(
            credentials,
            endpoint=settings.ocrspace_endpoint,
            timeout=settings.request_timeout_seconds,
        )

    raise ValueError(f"Unknown OCR_PROVIDER={settings.ocr_provider!r}")

"""OCR transport port, mock and factory tests — no network."""
from __future__ import annotations

import pytest

from ocrspace_node.ocr.base_ocr import OCRForm, OCRTransport
from ocrspace_node.ocr.mock_ocr import MockOCRTransport

FORM = OCRForm(file_name="a.png", content=b"img", mime_type="image/png", fields={"language": "eng"})


# ---------------------------------------------------------------------------
# Base OCRTransport
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_base_transport_raises_not_implemented() -> None:
    transport = OCRTransport()
    with pytest.raises(NotImplementedError):
        await transport.parse_image(FORM)


# ---------------------------------------------------------------------------
# MockOCRTransport
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_mock_returns_successful_response() -> None:
    response = await MockOCRTransport().parse_image(FORM)
    assert response["OCRExitCode"] == 1
    assert "a.png" in response["ParsedResults"][0]["ParsedText"]


@pytest.mark.asyncio
async def test_mock_returns_overlay_only_when_requested() -> None:
    plain = await MockOCRTransport().parse_image(FORM)
    assert plain["ParsedResults"][0]["TextOverlay"]["Lines"] == []

    overlay_form = OCRForm(
        file_name="a.png", content=b"img", mime_type="image/png", fields={"isOverlayRequired": "true"}
    )
    overlay = await MockOCRTransport().parse_image(overlay_form)
    assert overlay["ParsedResults"][0]["TextOverlay"]["HasOverlay"] is True


# ---------------------------------------------------------------------------
# OCR Factory
# ---------------------------------------------------------------------------

def test_ocr_factory_returns_mock() -> None:
    import os
    os.environ["OCR_PROVIDER"] = "mock"

    from importlib import reload
    import ocrspace_node.core.config as cfg_module
    import ocrspace_node.ocr.factory as factory_module
    reload(cfg_module)
    reload(factory_module)

    transport = factory_module.get_ocr_transport()
    assert isinstance(transport, MockOCRTransport)


def test_ocr_factory_returns_ocrspace_transport() -> None:
    import os
    os.environ["OCR_PROVIDER"] = "ocrspace"

    from importlib import reload
    import ocrspace_node.core.config as cfg_module
    import ocrspace_node.ocr.factory as factory_module
    reload(cfg_module)
    reload(factory_module)

    from ocrspace_node.ocr.ocrspace import OCRSpaceTransport
    try:
        transport = factory_module.get_ocr_transport()
        assert isinstance(transport, OCRSpaceTransport)
    finally:
        os.environ["OCR_PROVIDER"] = "mock"
        reload(cfg_module)
        reload(factory_module)


def test_ocr_factory_raises_on_unknown_provider() -> None:
    import os
    os.environ["OCR_PROVIDER"] = "unknown_engine"

    from importlib import reload
    import ocrspace_node.core.config as cfg_module
    import ocrspace_node.ocr.factory as factory_module
    reload(cfg_module)
    reload(factory_module)

    try:
        with pytest.raises(ValueError, match="Unknown OCR_PROVIDER"):
            factory_module.get_ocr_transport()
    finally:
        os.environ["OCR_PROVIDER"] = "mock"
        reload(cfg_module)
        reload(factory_module)

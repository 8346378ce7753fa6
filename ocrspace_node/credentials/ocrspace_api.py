"""OCR.space API key credential: header injection and connectivity test."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from ocrspace_node.core.errors import OCRTransportError
from ocrspace_node.schemas import is_success_exit_code

if TYPE_CHECKING:
    from ocrspace_node.ocr.ocrspace import OCRSpaceTransport

logger = logging.getLogger(__name__)

TEST_IMAGE_URL = "https://via.placeholder.com/150x50/000000/FFFFFF?text=TEST"
AUTH_FAILED_MESSAGE = "Authentication failed. Please check your API key."


@dataclass(frozen=True)
class CredentialTestResult:
    status: str  # OK | Error
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "OK"


class OcrSpaceApiCredentials(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_key: SecretStr = Field(alias="apiKey")

    def authenticate(self) -> dict[str, str]:
        """Headers added to every OCR.space request."""
        return {"apikey": self.api_key.get_secret_value()}

    async def test(self, transport: "OCRSpaceTransport | None" = None) -> CredentialTestResult:
        """Post a placeholder image URL and require ``OCRExitCode == 1``."""
        from ocrspace_node.ocr.ocrspace import OCRSpaceTransport

        owned = transport is None
        if transport is None:
            transport = OCRSpaceTransport(self)
        try:
            body = await transport.post({"url": TEST_IMAGE_URL, "language": "eng"})
        except OCRTransportError as exc:
            logger.warning("credential_test_transport_error", extra={"error": exc.message})
            return CredentialTestResult(status="Error", message=exc.message)
        finally:
            if owned:
                await transport.aclose()

        if not is_success_exit_code(body.get("OCRExitCode")):
            logger.info("credential_test_failed", extra={"ocr_exit_code": body.get("OCRExitCode")})
            return CredentialTestResult(status="Error", message=AUTH_FAILED_MESSAGE)

        return CredentialTestResult(status="OK", message="Connection successful")

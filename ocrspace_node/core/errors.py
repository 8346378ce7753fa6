"""Error taxonomy for the OCR.space node.

Every error raised while processing an item is a ``NodeOperationError`` so the
controller can attach the failing item's index. The index is set once: an
error that already knows its item keeps it.
"""
from __future__ import annotations

from typing import Any


class NodeOperationError(Exception):
    def __init__(self, message: str, *, item_index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.item_index = item_index

    def with_item_index(self, item_index: int) -> "NodeOperationError":
        if self.item_index is None:
            self.item_index = item_index
        return self


class MissingBinaryDataError(NodeOperationError):
    """The item has no binary payload under the configured property."""

    def __init__(self, binary_property_name: str, *, item_index: int | None = None) -> None:
        super().__init__(
            f"No binary data found in property: {binary_property_name}",
            item_index=item_index,
        )
        self.binary_property_name = binary_property_name


class OCRServiceError(NodeOperationError):
    """OCR.space answered, but its OCRExitCode signals failure."""

    def __init__(
        self,
        error_messages: list[str] | None = None,
        *,
        exit_code: Any = None,
        item_index: int | None = None,
    ) -> None:
        self.error_messages = list(error_messages or [])
        self.exit_code = exit_code
        detail = ", ".join(self.error_messages) or "Unknown OCR error"
        super().__init__(f"OCR.space API error: {detail}", item_index=item_index)


class OCRTransportError(NodeOperationError):
    """Network, HTTP status or body-decoding failure talking to OCR.space."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        item_index: int | None = None,
    ) -> None:
        super().__init__(message, item_index=item_index)
        self.status_code = status_code

"""Build the multipart upload for one item."""
from __future__ import annotations

from ocrspace_node.core.errors import MissingBinaryDataError
from ocrspace_node.node.parameters import OCRRequestOptions
from ocrspace_node.ocr.base_ocr import OCRForm
from ocrspace_node.schemas import NodeExecutionData

# option attribute -> form field; sent as "true" when enabled, omitted otherwise
_FLAG_FIELDS: tuple[tuple[str, str], ...] = (
    ("detect_orientation", "detectOrientation"),
    ("is_overlay_required", "isOverlayRequired"),
    ("scale", "scale"),
    ("is_table", "isTable"),
)


def build_ocr_form(
    item: NodeExecutionData,
    item_index: int,
    binary_property_name: str,
    options: OCRRequestOptions,
) -> OCRForm:
    binary = (item.binary or {}).get(binary_property_name)
    if binary is None:
        raise MissingBinaryDataError(binary_property_name, item_index=item_index)

    file_name = binary.file_name or f"document_{item_index}.{binary.file_extension or 'jpg'}"

    fields: dict[str, str] = {
        "filetype": binary.file_extension or "",
        "language": options.language,
        "OCREngine": options.engine,
    }
    for attr, field_name in _FLAG_FIELDS:
        if getattr(options, attr):
            fields[field_name] = "true"

    return OCRForm(
        file_name=file_name,
        content=binary.content(),
        mime_type=binary.mime_type or "application/octet-stream",
        fields=fields,
    )

"""Node parameter validation and description tests."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from ocrspace_node.node.description import NODE_DESCRIPTION
from ocrspace_node.node.parameters import LANGUAGES, NodeParameters, OCRRequestOptions


def test_defaults() -> None:
    params = NodeParameters()
    assert params.binary_property_name == "data"
    assert params.language == "auto"
    assert params.ocr_engine == "2"
    options = OCRRequestOptions.from_parameters(params)
    assert options == OCRRequestOptions()


def test_camel_case_input() -> None:
    params = NodeParameters.model_validate(
        {
            "binaryPropertyName": "scan",
            "language": "jpn",
            "OCREngine": "1",
            "additionalOptions": {"detectOrientation": True, "scale": True},
        }
    )
    options = OCRRequestOptions.from_parameters(params)
    assert options.language == "jpn"
    assert options.engine == "1"
    assert options.detect_orientation and options.scale
    assert not options.is_overlay_required and not options.is_table


@pytest.mark.parametrize(
    "raw",
    [
        {"language": "klingon"},
        {"OCREngine": "3"},
        {"binaryPropertyName": ""},
        {"additionalOptions": {"unknownFlag": True}},
    ],
)
def test_invalid_parameters_rejected(raw: dict) -> None:
    with pytest.raises(ValidationError):
        NodeParameters.model_validate(raw)


def test_request_options_are_immutable() -> None:
    options = OCRRequestOptions()
    with pytest.raises(AttributeError):
        options.scale = True  # type: ignore[misc]


def test_description_lists_every_language() -> None:
    language_prop = next(p for p in NODE_DESCRIPTION["properties"] if p["name"] == "language")
    assert [o["value"] for o in language_prop["options"]] == [code for _, code in LANGUAGES]
    assert language_prop["default"] == "auto"
    assert len(LANGUAGES) == 25

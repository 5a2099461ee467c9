import base64

import pytest

from app.modules.plant_identification.application.image_input import file_to_data_uri, validate_data_uri
from app.modules.plant_identification.domain.models.image import ImageArtifact
from app.shared.core.exceptions import InputValidationError

from conftest import PNG_BYTES, PNG_DATA_URI

MAX_SIZE = 1024 * 1024


def test_upload_is_encoded_as_data_uri():
    uri = file_to_data_uri(PNG_BYTES, "image/png", MAX_SIZE)

    assert uri == PNG_DATA_URI


def test_upload_mime_parameters_are_dropped():
    uri = file_to_data_uri(b"jpeg", "Image/JPEG; charset=binary", MAX_SIZE)

    assert uri.startswith("data:image/jpeg;base64,")


@pytest.mark.parametrize("content_type", [None, "", "text/plain", "application/pdf"])
def test_non_image_upload_is_rejected(content_type):
    with pytest.raises(InputValidationError) as exc_info:
        file_to_data_uri(b"hello", content_type, MAX_SIZE)

    assert exc_info.value.details["constraint"] == "image_mime_type"


def test_empty_upload_is_rejected():
    with pytest.raises(InputValidationError):
        file_to_data_uri(b"", "image/png", MAX_SIZE)


def test_oversized_upload_is_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        file_to_data_uri(b"x" * 11, "image/png", 10)

    assert exc_info.value.details["constraint"] == "max_size"


def test_data_uri_is_normalized():
    payload = base64.b64encode(PNG_BYTES).decode("ascii")
    messy = f"  data:IMAGE/PNG;base64,{payload[:10]}\n{payload[10:]}  "

    assert validate_data_uri(messy, MAX_SIZE) == PNG_DATA_URI


@pytest.mark.parametrize(
    "value",
    [
        "not a data uri",
        "data:text/plain;base64,aGVsbG8=",
        "data:image/png;base64,",
        "data:image/png;base64,@@@@",
        "data:image/png,rawbytes",
    ],
)
def test_unusable_data_uris_are_rejected(value):
    with pytest.raises(InputValidationError):
        validate_data_uri(value, MAX_SIZE)


def test_data_uri_size_is_checked_on_decoded_bytes():
    artifact = ImageArtifact.from_data_uri(PNG_DATA_URI)

    assert artifact.size_bytes == len(PNG_BYTES)
    with pytest.raises(InputValidationError):
        validate_data_uri(PNG_DATA_URI, len(PNG_BYTES) - 1)

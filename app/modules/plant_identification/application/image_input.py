# 📄 File: app/modules/plant_identification/application/image_input.py
# 🧭 Purpose (Layman Explanation):
# Takes the photo a user uploaded or snapped with their camera and turns it into the single
# text string the AI understands, refusing anything that isn't a picture.
# 🧪 Purpose (Technical Summary):
# Image acquisition: multipart upload or submitted data URI -> validated base64 data URI.
# Enforces image MIME types, non-empty payloads and the configured size limit.
# 🔗 Dependencies:
# ImageArtifact domain value object, InputValidationError
# 🔄 Connected Modules / Calls From:
# identification_service.py, identification API endpoints

from typing import Optional

from app.shared.core.exceptions import InputValidationError

from ..domain.models.image import ImageArtifact


def _check_size(size: int, max_size: int) -> None:
    if size > max_size:
        raise InputValidationError(
            f"Image is too large. Maximum size is {max_size // (1024 * 1024)}MB.",
            field="image",
            constraint="max_size",
            details={"size_bytes": size, "max_size_bytes": max_size},
        )


def file_to_data_uri(content: bytes, content_type: Optional[str], max_size: int) -> str:
    """
    Encode an uploaded image file as a base64 data URI.

    Raises:
        InputValidationError: not an image type, empty, or too large
    """
    if not content_type or not content_type.lower().startswith("image/"):
        raise InputValidationError(
            field="image",
            constraint="image_mime_type",
            details={"content_type": content_type},
        )
    if not content:
        raise InputValidationError("Failed to read image: the file is empty.", field="image")

    _check_size(len(content), max_size)
    return ImageArtifact.from_bytes(content, content_type).to_data_uri()


def validate_data_uri(value: str, max_size: int) -> str:
    """Check a client-submitted data URI and return it in normalized form."""
    artifact = ImageArtifact.from_data_uri(value)
    _check_size(artifact.size_bytes, max_size)
    return artifact.to_data_uri()

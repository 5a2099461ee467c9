# 📄 File: app/modules/plant_identification/domain/models/image.py
# 🧭 Purpose (Layman Explanation):
# A plant photo as the app passes it around: a "data URI" text string that carries both the
# image type (JPEG, PNG...) and the picture itself.
# 🧪 Purpose (Technical Summary):
# ImageArtifact value object parsing and rendering base64 data URIs
# ("data:<mime>;base64,<payload>").
# 🔗 Dependencies:
# base64, binascii, re, dataclasses
# 🔄 Connected Modules / Calls From:
# image_input.py, gemini_client.py

import base64
import binascii
import re
from dataclasses import dataclass

from app.shared.core.exceptions import InputValidationError

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class ImageArtifact:
    mime_type: str
    data: str

    @classmethod
    def from_data_uri(cls, value: str) -> "ImageArtifact":
        """
        Parse and check a base64 image data URI.

        Raises:
            InputValidationError: not a data URI, not an image, or bad base64
        """
        if not isinstance(value, str):
            raise InputValidationError("Image must be provided as a data URI", field="imageDataUri")

        match = _DATA_URI_RE.match(value.strip())
        if not match:
            raise InputValidationError(
                "Image must be a base64 data URI (data:<mimetype>;base64,<data>)",
                field="imageDataUri",
                constraint="data_uri",
            )

        mime_type = match.group("mime").lower()
        if not mime_type.startswith("image/"):
            raise InputValidationError(field="imageDataUri", constraint="image_mime_type")

        data = "".join(match.group("data").split())
        if not data:
            raise InputValidationError("Image data is empty", field="imageDataUri")
        try:
            base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            raise InputValidationError(
                "Failed to read image: invalid base64 data",
                field="imageDataUri",
                constraint="base64",
            )

        return cls(mime_type=mime_type, data=data)

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str) -> "ImageArtifact":
        return cls(mime_type=mime_type.split(";")[0].strip().lower(), data=base64.b64encode(content).decode("ascii"))

    @property
    def size_bytes(self) -> int:
        padding = self.data[-2:].count("=")
        return len(self.data) * 3 // 4 - padding

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

# 📄 File: app/shared/core/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Small helpers every endpoint can ask for: the app settings and "who is this device",
# so each user's favourites and last photo stay separate.
# 🧪 Purpose (Technical Summary):
# Common FastAPI dependencies: application settings and the client id taken from the
# X-Client-ID header.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# plant_identification and favourites presentation layers, health endpoints

"""
Common FastAPI dependencies for the Plant Identifier API.
"""

import re
from typing import Optional

from fastapi import Header, Request

from ..config.settings import Settings, get_settings
from .exceptions import InputValidationError

DEFAULT_CLIENT_ID = "anonymous"

_CLIENT_ID_RE = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


# Settings dependency
def get_app_settings(request: Request) -> Settings:
    """
    Settings the running application was created with.

    Returns:
        Settings: Application settings (cached global settings as fallback)
    """
    return getattr(request.app.state, "settings", None) or get_settings()


def get_client_id(x_client_id: Optional[str] = Header(None, alias="X-Client-ID")) -> str:
    """
    Identify the calling client from the ``X-Client-ID`` header.

    Missing header means the shared ``anonymous`` client. The id names a
    storage slot, so only a conservative character set is accepted.
    """
    if x_client_id is None or not x_client_id.strip():
        return DEFAULT_CLIENT_ID

    client_id = x_client_id.strip()
    if not _CLIENT_ID_RE.match(client_id):
        raise InputValidationError(
            "Invalid X-Client-ID header",
            field="X-Client-ID",
            constraint="pattern",
        )
    return client_id



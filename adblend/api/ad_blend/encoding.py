"""Conversion between uploaded image bytes and Base64 data URIs."""

import base64
import binascii
import re
from typing import Tuple

from fastapi import UploadFile

from adblend.exceptions import InvalidDataUriError

ACCEPTED_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>[A-Za-z0-9+/=\s]*)$")


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encodes raw bytes as ``data:<mime_type>;base64,<payload>``."""
    base64_encoded_data = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{base64_encoded_data}"


async def upload_to_data_uri(upload: UploadFile) -> str:
    """Reads the full content of an uploaded file and encodes it with its declared content type."""
    data = await upload.read()
    return to_data_uri(data, upload.content_type or "application/octet-stream")


def _match(uri: str) -> re.Match:
    """Matches a data URI against the canonical form or raises InvalidDataUriError."""
    match = _DATA_URI_RE.match(uri or "")
    if not match:
        raise InvalidDataUriError("Expected format: 'data:<mimetype>;base64,<encoded_data>'.")
    return match


def parse_data_uri(uri: str) -> Tuple[str, bytes]:
    """Splits a data URI into its MIME type and decoded bytes."""
    match = _match(uri)
    try:
        data = base64.b64decode(match.group("payload"), validate=False)
    except binascii.Error as e:
        raise InvalidDataUriError(f"Invalid base64 payload: {e}") from e
    return match.group("mime"), data


def data_uri_mime_type(uri: str) -> str:
    """Returns the declared MIME type without decoding the payload."""
    return _match(uri).group("mime")

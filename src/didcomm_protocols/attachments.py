"""
Attachment codec.

Two embedding strategies are in use and are kept apart on purpose:

- inline: the JSON value sits directly in ``data.json`` (out-of-band invitations)
- base64: the value is serialized to compact JSON text and base64-encoded into
  ``data.base64`` (issue-credential, present-proof)
"""

import base64
import binascii
import copy
import json
from typing import Any, Optional

from didcomm_protocols.errors import MalformedAttachment
from didcomm_protocols.models.envelope import Attachment, AttachmentData
from didcomm_protocols.serialization import compact_json


def embed_inline(id: str, value: Any, media_type: Optional[str] = None) -> Attachment:
    """Wrap a JSON value as inline attachment data."""
    compact_json(value)  # reject values that cannot go on the wire
    return Attachment(id=id, media_type=media_type, data=AttachmentData(json_value=copy.deepcopy(value)))


def embed_base64(id: str, media_type: Optional[str], value: Any) -> Attachment:
    """Serialize ``value`` to JSON and store it base64-encoded."""
    encoded = base64.b64encode(compact_json(value).encode("utf-8")).decode("ascii")
    return Attachment(id=id, media_type=media_type, data=AttachmentData(base64=encoded))


def decode_base64(attachment: Attachment) -> Any:
    """Inverse of :func:`embed_base64`: base64 -> UTF-8 -> JSON."""
    payload = attachment.data.base64
    if payload is None:
        raise MalformedAttachment("Attachment has no base64 payload", attachment.id)
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedAttachment(f"Invalid base64 payload: {e}", attachment.id) from e
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedAttachment(f"Payload is not UTF-8: {e}", attachment.id) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedAttachment(f"Payload is not JSON: {e}", attachment.id) from e


def decode_attachment(attachment: Attachment) -> Any:
    """Return the JSON value carried by an attachment, whichever strategy embedded it."""
    if attachment.data.is_inline:
        return attachment.data.json_value
    return decode_base64(attachment)

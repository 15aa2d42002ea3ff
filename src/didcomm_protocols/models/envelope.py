"""
Plaintext DIDComm message envelope and attachment models.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from didcomm_protocols.defaults import PLAINTEXT_TYP
from didcomm_protocols.errors import MalformedMessage
from didcomm_protocols.identifiers import new_id
from didcomm_protocols.models.message_types import MessageType, parse_message_type
from didcomm_protocols.serialization import compact_json

# Top-level keys owned by the envelope itself; everything else is a header field.
RESERVED_KEYS = frozenset({"id", "typ", "type", "thid", "pthid", "created_time", "body", "attachments"})


class AttachmentData(BaseModel):
    """Attachment payload: either an inline JSON value or a base64 string."""

    json_value: Any = Field(default=None, alias="json")
    base64: Optional[str] = None
    link: str = ""  # out-of-line fetch is not used

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def _exactly_one_payload(self) -> "AttachmentData":
        if self.is_inline == (self.base64 is not None):
            raise ValueError("attachment data must carry exactly one of 'json' or 'base64'")
        return self

    @property
    def is_inline(self) -> bool:
        return "json_value" in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"json": copy.deepcopy(self.json_value)} if self.is_inline else {"base64": self.base64}
        data["link"] = self.link
        return data


class Attachment(BaseModel):
    id: str
    media_type: Optional[str] = None
    data: AttachmentData

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        raw: dict[str, Any] = {"id": self.id}
        if self.media_type is not None:
            raw["media_type"] = self.media_type
        raw["data"] = self.data.to_dict()
        return raw


class Envelope(BaseModel):
    """A protocol message before it is signed or encrypted.

    Header fields are string-valued and flattened into the top level of the
    wire form, next to ``id``/``type``/``body``.
    """

    type: str = Field(..., min_length=1)
    id: str = Field(default_factory=new_id, min_length=1)
    thid: Optional[str] = None
    pthid: Optional[str] = None
    created_time: Optional[int] = None
    body: Any = Field(default_factory=dict)
    header_fields: dict[str, str] = Field(default_factory=dict)
    attachments: tuple[Attachment, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("header_fields")
    @classmethod
    def _no_reserved_headers(cls, value: dict[str, str]) -> dict[str, str]:
        clashes = sorted(RESERVED_KEYS.intersection(value))
        if clashes:
            raise ValueError(f"header fields shadow envelope keys: {clashes}")
        return value

    @property
    def message_type(self) -> Optional[MessageType]:
        return parse_message_type(self.type)

    def header(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.header_fields.get(key, default)

    def iter_attachments(self) -> Iterator[Attachment]:
        return iter(self.attachments)

    def to_dict(self) -> dict[str, Any]:
        """Wire form, detached from this envelope.

        Header fields are emitted as the strings they hold: a parsed list-valued
        key such as ``to`` comes back as its JSON text, not as a list.
        """
        raw: dict[str, Any] = {"id": self.id, "typ": PLAINTEXT_TYP, "type": self.type}
        if self.thid is not None:
            raw["thid"] = self.thid
        if self.pthid is not None:
            raw["pthid"] = self.pthid
        if self.created_time is not None:
            raw["created_time"] = self.created_time
        raw["body"] = copy.deepcopy(self.body)
        if self.attachments:
            raw["attachments"] = [a.to_dict() for a in self.attachments]
        raw.update(self.header_fields)
        return raw

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, raw: Any) -> "Envelope":
        """Parse a plaintext message received from the envelope layer.

        Unknown top-level keys become header fields; non-string values are kept
        as their compact JSON text.
        """
        if not isinstance(raw, dict):
            raise MalformedMessage("Message must be a JSON object")
        if not raw.get("id"):
            raise MalformedMessage("Message has no id")
        attachments = raw.get("attachments") or []
        if not isinstance(attachments, list):
            raise MalformedMessage("Message attachments must be a list")
        headers = {
            key: value if isinstance(value, str) else compact_json(value)
            for key, value in raw.items()
            if key not in RESERVED_KEYS
        }
        try:
            return cls(
                id=raw["id"],
                type=raw.get("type") or "",
                thid=raw.get("thid"),
                pthid=raw.get("pthid"),
                created_time=raw.get("created_time"),
                body=copy.deepcopy(raw.get("body", {})),
                header_fields=headers,
                attachments=tuple(Attachment.model_validate(copy.deepcopy(a)) for a in attachments),
            )
        except ValidationError as e:
            raise MalformedMessage("Invalid DIDComm message", {"errors": e.errors(include_context=False)}) from e

    @classmethod
    def from_json(cls, text: str) -> "Envelope":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedMessage(f"Message is not valid JSON: {e}") from e
        return cls.from_dict(raw)

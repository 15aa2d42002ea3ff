"""
Credential preview — issue-credential 2.1 offer payload.

If an attribute has a ``mime-type``, its value is a base64url-encoded binary
blob; otherwise it is plain text.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from didcomm_protocols.defaults import CREDENTIAL_PREVIEW_TYPE
from didcomm_protocols.errors import MalformedMessage


class CredentialAttribute(BaseModel):
    name: str
    mime_type: Optional[str] = Field(default=None, alias="mime-type")
    value: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def binary(cls, name: str, data: bytes, mime_type: str) -> CredentialAttribute:
        encoded = base64.urlsafe_b64encode(data).decode("ascii")
        return cls(name=name, mime_type=mime_type, value=encoded)

    @property
    def is_binary(self) -> bool:
        return self.mime_type is not None

    def decoded_value(self) -> Union[str, bytes]:
        if not self.is_binary:
            return self.value
        padded = self.value + "=" * (-len(self.value) % 4)
        try:
            return base64.b64decode(padded, altchars=b"-_", validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedMessage(f"Attribute {self.name!r} is not base64url: {e}") from e


class CredentialPreview(BaseModel):
    type: str = CREDENTIAL_PREVIEW_TYPE
    attributes: list[CredentialAttribute] = []

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

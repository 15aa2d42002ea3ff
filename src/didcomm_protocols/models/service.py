"""
DIDComm service endpoint descriptor, embedded in out-of-band invitations.
"""

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field

from didcomm_protocols.defaults import SERVICE_ID_SUFFIX, SERVICE_TYPE


class Service(BaseModel):
    id: str
    recipient_keys: list[str] = Field(alias="recipientKeys")
    service_endpoint: str = Field(alias="serviceEndpoint")
    type: str = SERVICE_TYPE

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def create(cls, did: str, service_endpoint: str, recipient_keys: Sequence[str]) -> "Service":
        """Service for ``did``; the id is always ``<did>#didcomm``."""
        return cls(
            id=f"{did}{SERVICE_ID_SUFFIX}",
            service_endpoint=service_endpoint,
            recipient_keys=list(recipient_keys),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

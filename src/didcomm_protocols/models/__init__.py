from didcomm_protocols.models.credential import CredentialAttribute, CredentialPreview
from didcomm_protocols.models.envelope import Attachment, AttachmentData, Envelope
from didcomm_protocols.models.message_types import (
    BasicMessageType,
    DidExchangeType,
    IssueCredentialType,
    MessageType,
    OutOfBandType,
    PresentProofType,
    ReportProblemType,
    TrustPingType,
    parse_message_type,
)
from didcomm_protocols.models.service import Service

__all__ = [
    "Attachment",
    "AttachmentData",
    "BasicMessageType",
    "CredentialAttribute",
    "CredentialPreview",
    "DidExchangeType",
    "Envelope",
    "IssueCredentialType",
    "MessageType",
    "OutOfBandType",
    "PresentProofType",
    "ReportProblemType",
    "Service",
    "TrustPingType",
    "parse_message_type",
]

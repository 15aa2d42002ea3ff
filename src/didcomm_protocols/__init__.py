"""
didcomm-protocols — DIDComm protocol message builders.

Builds the next plaintext message of a multi-step exchange (out-of-band
invitation, DID exchange, trust ping, issue credential, present proof, report
problem, basic message) and keeps thread ids consistent across it. Signing,
encryption and transport are left to a DIDComm envelope library.
"""

from didcomm_protocols.attachments import decode_attachment, decode_base64, embed_base64, embed_inline
from didcomm_protocols.dispatch import DidExchangeState, exchange_state
from didcomm_protocols.errors import (
    DIDCommError,
    MalformedAttachment,
    MalformedMessage,
    MissingPredecessor,
    MissingRequiredField,
    UnsupportedPredecessorType,
)
from didcomm_protocols.linkage import Role, ThreadIds, derive_thread
from didcomm_protocols.models import (
    Attachment,
    CredentialAttribute,
    CredentialPreview,
    Envelope,
    Service,
    parse_message_type,
)
from didcomm_protocols.protocols import (
    BasicMessageBuilder,
    DidExchangeBuilder,
    GoalCode,
    InvitationBuilder,
    IssueCredentialBuilder,
    PresentProofBuilder,
    ReportProblemBuilder,
    TrustPingBuilder,
)

__version__ = "0.1.0"
__all__ = [
    "Attachment",
    "BasicMessageBuilder",
    "CredentialAttribute",
    "CredentialPreview",
    "DIDCommError",
    "DidExchangeBuilder",
    "DidExchangeState",
    "Envelope",
    "GoalCode",
    "InvitationBuilder",
    "IssueCredentialBuilder",
    "MalformedAttachment",
    "MalformedMessage",
    "MissingPredecessor",
    "MissingRequiredField",
    "PresentProofBuilder",
    "ReportProblemBuilder",
    "Role",
    "Service",
    "ThreadIds",
    "TrustPingBuilder",
    "UnsupportedPredecessorType",
    "decode_attachment",
    "decode_base64",
    "derive_thread",
    "embed_base64",
    "embed_inline",
    "exchange_state",
    "parse_message_type",
]

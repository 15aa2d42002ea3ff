"""
Message type URIs, one closed enumeration per protocol.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

DIDCOMM_ORG = "https://didcomm.org"


class BasicMessageType(str, Enum):
    MESSAGE = f"{DIDCOMM_ORG}/basicmessage/2.0/message"


class OutOfBandType(str, Enum):
    INVITATION = f"{DIDCOMM_ORG}/out-of-band/2.0/invitation"


class DidExchangeType(str, Enum):
    REQUEST = f"{DIDCOMM_ORG}/didexchange/1.0/request"
    RESPONSE = f"{DIDCOMM_ORG}/didexchange/1.0/response"
    COMPLETE = f"{DIDCOMM_ORG}/didexchange/1.0/complete"


class IssueCredentialType(str, Enum):
    OFFER_CREDENTIAL = f"{DIDCOMM_ORG}/issue-credential/2.1/offer-credential"
    PROPOSE_CREDENTIAL = f"{DIDCOMM_ORG}/issue-credential/2.1/propose-credential"
    ISSUE_CREDENTIAL = f"{DIDCOMM_ORG}/issue-credential/2.1/issue-credential"


class PresentProofType(str, Enum):
    PRESENTATION = f"{DIDCOMM_ORG}/present-proof/2.1/presentation"


class ReportProblemType(str, Enum):
    PROBLEM_REPORT_V1 = f"{DIDCOMM_ORG}/report-problem/1.0/problem-report"
    PROBLEM_REPORT_V2 = f"{DIDCOMM_ORG}/report-problem/2.0/problem-report"


class TrustPingType(str, Enum):
    PING = f"{DIDCOMM_ORG}/trust-ping/2.0/ping"
    PING_RESPONSE = f"{DIDCOMM_ORG}/trust-ping/2.0/ping-response"


MessageType = Union[
    BasicMessageType,
    OutOfBandType,
    DidExchangeType,
    IssueCredentialType,
    PresentProofType,
    ReportProblemType,
    TrustPingType,
]

ALL_TYPES: tuple[type[Enum], ...] = (
    BasicMessageType,
    OutOfBandType,
    DidExchangeType,
    IssueCredentialType,
    PresentProofType,
    ReportProblemType,
    TrustPingType,
)

_BY_URI: dict[str, Any] = {member.value: member for enum in ALL_TYPES for member in enum}


def parse_message_type(uri: Optional[str]) -> Optional[MessageType]:
    """Map a type URI to its enumeration member, or None when unknown.

    Some peers emit the URI wrapped in an extra pair of double quotes (a
    JSON-encoded string used as the raw value). That form is accepted but
    logged, since it is not a valid type on the wire.
    """
    if not uri:
        return None
    member = _BY_URI.get(uri)
    if member is not None:
        return member
    if len(uri) > 2 and uri.startswith('"') and uri.endswith('"'):
        member = _BY_URI.get(uri[1:-1])
        if member is not None:
            logger.warning("Accepting double-quoted message type %s", uri)
        return member
    return None

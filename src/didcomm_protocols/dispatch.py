"""
Predecessor dispatch: pick the next protocol step from an incoming message's type.

Each table maps the predecessor type that may trigger a step to the name of
the builder method producing it.
"""

import logging
from enum import Enum
from typing import Mapping, Optional

from didcomm_protocols.errors import MissingPredecessor, UnsupportedPredecessorType
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import (
    DidExchangeType,
    IssueCredentialType,
    MessageType,
    OutOfBandType,
    TrustPingType,
)

logger = logging.getLogger(__name__)

Transitions = Mapping[MessageType, str]

DIDEXCHANGE_TRANSITIONS: Transitions = {
    OutOfBandType.INVITATION: "build_request",
    DidExchangeType.REQUEST: "build_response",
    DidExchangeType.RESPONSE: "build_complete",
}

ISSUE_CREDENTIAL_TRANSITIONS: Transitions = {
    IssueCredentialType.OFFER_CREDENTIAL: "build_propose_credential",
}

TRUST_PING_TRANSITIONS: Transitions = {
    TrustPingType.PING: "build_response",
}


def route(protocol: str, transitions: Transitions, predecessor: Optional[Envelope]) -> str:
    """Return the builder method name for the step following ``predecessor``."""
    if predecessor is None:
        raise MissingPredecessor(f"{protocol} needs a predecessor message to continue")
    message_type = predecessor.message_type
    step = transitions.get(message_type) if message_type is not None else None
    if step is None:
        logger.warning("%s cannot continue from message type %s", protocol, predecessor.type)
        raise UnsupportedPredecessorType(predecessor.type, [t.value for t in transitions])
    logger.debug("%s: %s -> %s", protocol, message_type.value, step)
    return step


class DidExchangeState(str, Enum):
    NO_MESSAGE = "no-message"
    INVITATION = "invitation"
    REQUEST = "request"
    RESPONSE = "response"
    COMPLETE = "complete"


_EXCHANGE_STATES: dict[MessageType, DidExchangeState] = {
    OutOfBandType.INVITATION: DidExchangeState.INVITATION,
    DidExchangeType.REQUEST: DidExchangeState.REQUEST,
    DidExchangeType.RESPONSE: DidExchangeState.RESPONSE,
    DidExchangeType.COMPLETE: DidExchangeState.COMPLETE,
}


def exchange_state(message: Optional[Envelope]) -> DidExchangeState:
    """DID exchange state reached once ``message`` has been sent or received."""
    if message is None:
        return DidExchangeState.NO_MESSAGE
    state = _EXCHANGE_STATES.get(message.message_type) if message.message_type is not None else None
    if state is None:
        raise UnsupportedPredecessorType(message.type, [t.value for t in _EXCHANGE_STATES])
    return state

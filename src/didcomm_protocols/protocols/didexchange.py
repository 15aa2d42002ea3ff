"""
DID Exchange 1.0 — exchange DIDs between agents to establish a DID based
relationship.
<https://github.com/hyperledger/aries-rfcs/blob/main/features/0023-did-exchange/README.md>

    invitation -> request -> response -> complete

``build()`` looks at the received message and produces the next step. The
request opens a new thread named after the invitation; the response opens one
named after the request; complete stays on the response's thread.
"""

from typing import Any, Optional

from didcomm_protocols.defaults import RELATIONSHIP_GOAL
from didcomm_protocols.dispatch import DIDEXCHANGE_TRANSITIONS, route
from didcomm_protocols.linkage import Role, derive_thread
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import DidExchangeType
from didcomm_protocols.protocols.base import ResponseBuilder
from didcomm_protocols.serialization import pretty_json


class DidExchangeBuilder(ResponseBuilder):
    did: Optional[str] = None
    did_doc: Optional[dict[str, Any]] = None

    def with_did(self, did: str) -> "DidExchangeBuilder":
        return self._set(did=did)

    def with_did_doc(self, did_doc: dict[str, Any]) -> "DidExchangeBuilder":
        return self._set(did_doc=did_doc)

    def build(self) -> Envelope:
        step = route("didexchange", DIDEXCHANGE_TRANSITIONS, self.message)
        return getattr(self, step)()

    def _did_headers(self) -> dict[str, str]:
        did = self._required("did", self.did)
        did_doc = self._required("did_doc", self.did_doc)
        return {"did": did, "did_doc~attach": pretty_json(did_doc)}

    def build_request(self) -> Envelope:
        headers = {"goal": RELATIONSHIP_GOAL, **self._did_headers()}
        thread = derive_thread(self.message, Role.FIRST_RESPONSE, id_factory=self.id_factory)
        return self._envelope(DidExchangeType.REQUEST, thread=thread, headers=headers)

    def build_response(self) -> Envelope:
        headers = self._did_headers()
        thread = derive_thread(self.message, Role.RESPONSE, id_factory=self.id_factory)
        return self._envelope(DidExchangeType.RESPONSE, thread=thread, headers=headers)

    def build_complete(self) -> Envelope:
        thread = derive_thread(self.message, Role.COMPLETE, id_factory=self.id_factory)
        return self._envelope(DidExchangeType.COMPLETE, thread=thread)

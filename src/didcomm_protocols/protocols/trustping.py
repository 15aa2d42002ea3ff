"""
Trust Ping 2.0 — check that a connection works, end to end.
<https://identity.foundation/didcomm-messaging/spec/#trust-ping-protocol-20>
"""

from typing import Optional

from didcomm_protocols.dispatch import TRUST_PING_TRANSITIONS, route
from didcomm_protocols.linkage import Role, derive_thread
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import TrustPingType
from didcomm_protocols.protocols.base import ResponseBuilder


class TrustPingBuilder(ResponseBuilder):
    thid: Optional[str] = None
    response_requested: bool = True

    def with_thid(self, thid: str) -> "TrustPingBuilder":
        """Thread id for the ping-response; wins over the ping's own id."""
        return self._set(thid=thid)

    def with_response_requested(self, response_requested: bool) -> "TrustPingBuilder":
        return self._set(response_requested=response_requested)

    def build(self) -> Envelope:
        """A ping when nothing was received, otherwise the answer to the ping."""
        if self.message is None:
            return self.build_ping()
        step = route("trust-ping", TRUST_PING_TRANSITIONS, self.message)
        return getattr(self, step)()

    def build_ping(self) -> Envelope:
        return self._envelope(TrustPingType.PING, body={"response_requested": self.response_requested})

    def build_response(self) -> Envelope:
        thread = derive_thread(self.message, Role.PING_RESPONSE, thid_override=self.thid)
        return self._envelope(TrustPingType.PING_RESPONSE, thread=thread)

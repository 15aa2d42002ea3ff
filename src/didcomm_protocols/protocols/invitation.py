"""
Out-of-band invitation 2.0 — the single unencrypted message that bootstraps
a relationship before a shared channel exists.
<https://identity.foundation/didcomm-messaging/spec/#invitation>

Attached messages are embedded inline as JSON.
"""

from enum import Enum
from typing import Any, Optional, Sequence, Union

from didcomm_protocols.attachments import embed_inline
from didcomm_protocols.defaults import ACCEPT
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import OutOfBandType
from didcomm_protocols.models.service import Service
from didcomm_protocols.protocols.base import MessageBuilder
from didcomm_protocols.serialization import compact_json


class GoalCode(str, Enum):
    STREAMLINED_VC = "streamlined-vc"
    STREAMLINED_VP = "streamlined-vp"


class InvitationBuilder(MessageBuilder):
    goal_code: Optional[str] = None
    goal: Optional[str] = None
    attachments: tuple[Envelope, ...] = ()
    services: Optional[tuple[Service, ...]] = None

    def with_goal_code(self, goal_code: Union[GoalCode, str]) -> "InvitationBuilder":
        """Known codes may be given as GoalCode; any other string is used verbatim."""
        value = goal_code.value if isinstance(goal_code, GoalCode) else goal_code
        return self._set(goal_code=value)

    def with_goal(self, goal: str) -> "InvitationBuilder":
        return self._set(goal=goal)

    def with_attachments(self, attachments: Sequence[Envelope]) -> "InvitationBuilder":
        return self._set(attachments=tuple(attachments))

    def with_services(self, services: Sequence[Service]) -> "InvitationBuilder":
        return self._set(services=tuple(services))

    def build_body(self) -> dict[str, Any]:
        goal_code = self._required("goal_code", self.goal_code)
        body: dict[str, Any] = {"goal_code": goal_code, "accept": list(ACCEPT)}
        if self.goal is not None:
            body["goal"] = self.goal
        return body

    def build(self) -> Envelope:
        body = self.build_body()
        headers: dict[str, str] = {}
        if self.services is not None:
            headers["services"] = compact_json([s.to_dict() for s in self.services])
        return self._envelope(
            OutOfBandType.INVITATION,
            body=body,
            headers=headers,
            attachments=[embed_inline(m.id, m.to_dict()) for m in self.attachments],
        )

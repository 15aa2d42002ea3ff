"""
Present Proof 2.1 — general purpose verifiable presentation exchange,
independent of the presentation format.
<https://github.com/hyperledger/aries-rfcs/blob/main/features/0454-present-proof-v2/README.md>
"""

from typing import Any, Optional

from didcomm_protocols.attachments import embed_base64
from didcomm_protocols.defaults import JSON_MEDIA_TYPE, PRESENTATION_ATTACHMENT_ID
from didcomm_protocols.errors import MissingRequiredField
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import PresentProofType
from didcomm_protocols.protocols.base import ResponseBuilder


class PresentProofBuilder(ResponseBuilder):
    comment: Optional[str] = None
    goal_code: Optional[str] = None
    attachments: tuple[Any, ...] = ()

    def with_comment(self, comment: str) -> "PresentProofBuilder":
        return self._set(comment=comment)

    def with_goal_code(self, goal_code: str) -> "PresentProofBuilder":
        return self._set(goal_code=goal_code)

    def with_attachment(self, attachment: Any) -> "PresentProofBuilder":
        return self._set(attachments=self.attachments + (attachment,))

    def build(self) -> Envelope:
        return self.build_presentation()

    def build_presentation(self) -> Envelope:
        """Presentation with each attached value base64-encoded as JSON."""
        if not self.attachments:
            raise MissingRequiredField("attachments")
        headers: dict[str, str] = {}
        if self.comment is not None:
            headers["comment"] = self.comment
        if self.goal_code is not None:
            headers["goal_code"] = self.goal_code
        return self._envelope(
            PresentProofType.PRESENTATION,
            thread=self._reply_thread(),
            headers=headers,
            attachments=[embed_base64(PRESENTATION_ATTACHMENT_ID, JSON_MEDIA_TYPE, a) for a in self.attachments],
        )

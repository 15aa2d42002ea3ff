"""
Issue Credential 2.1.
<https://github.com/hyperledger/aries-rfcs/blob/main/features/0453-issue-credential-v2/README.md>

Only offer -> propose is driven by ``build()``; offers and issued credentials
are built directly. Credentials travel as base64-encoded JSON attachments.
"""

from typing import Any, Optional

from didcomm_protocols.attachments import embed_base64
from didcomm_protocols.defaults import CREDENTIAL_ATTACHMENT_ID, JSON_MEDIA_TYPE, RELATIONSHIP_GOAL
from didcomm_protocols.dispatch import ISSUE_CREDENTIAL_TRANSITIONS, route
from didcomm_protocols.errors import MissingRequiredField
from didcomm_protocols.models.credential import CredentialPreview
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import IssueCredentialType
from didcomm_protocols.protocols.base import ResponseBuilder
from didcomm_protocols.serialization import compact_json, pretty_json


class IssueCredentialBuilder(ResponseBuilder):
    comment: Optional[str] = None
    credential_preview: Optional[CredentialPreview] = None
    did: Optional[str] = None
    did_doc: Optional[dict[str, Any]] = None
    goal_code: Optional[str] = None
    replacement_id: Optional[str] = None
    attachments: tuple[Any, ...] = ()

    def with_comment(self, comment: str) -> "IssueCredentialBuilder":
        return self._set(comment=comment)

    def with_credential_preview(self, credential_preview: CredentialPreview) -> "IssueCredentialBuilder":
        return self._set(credential_preview=credential_preview)

    def with_did(self, did: str) -> "IssueCredentialBuilder":
        return self._set(did=did)

    def with_did_doc(self, did_doc: dict[str, Any]) -> "IssueCredentialBuilder":
        return self._set(did_doc=did_doc)

    def with_goal_code(self, goal_code: str) -> "IssueCredentialBuilder":
        return self._set(goal_code=goal_code)

    def with_replacement_id(self, replacement_id: str) -> "IssueCredentialBuilder":
        return self._set(replacement_id=replacement_id)

    def with_attachment(self, attachment: Any) -> "IssueCredentialBuilder":
        return self._set(attachments=self.attachments + (attachment,))

    def build(self) -> Envelope:
        step = route("issue-credential", ISSUE_CREDENTIAL_TRANSITIONS, self.message)
        return getattr(self, step)()

    def build_offer_credential(self) -> Envelope:
        comment = self._required("comment", self.comment)
        goal_code = self._required("goal_code", self.goal_code)
        preview = self._required("credential_preview", self.credential_preview)
        headers = {
            "comment": comment,
            "goal_code": goal_code,
            "credential_preview": compact_json(preview.to_dict()),
        }
        if self.replacement_id is not None:
            headers["replacement_id"] = self.replacement_id
        return self._envelope(IssueCredentialType.OFFER_CREDENTIAL, thread=self._reply_thread(), headers=headers)

    def build_propose_credential(self) -> Envelope:
        did = self._required("did", self.did)
        did_doc = self._required("did_doc", self.did_doc)
        headers = {
            "goal": RELATIONSHIP_GOAL,
            "did": did,
            "did_doc~attach": pretty_json(did_doc),
        }
        return self._envelope(IssueCredentialType.PROPOSE_CREDENTIAL, thread=self._reply_thread(), headers=headers)

    def build_issue_credential(self) -> Envelope:
        if not self.attachments:
            raise MissingRequiredField("attachments")
        headers: dict[str, str] = {}
        if self.comment is not None:
            headers["comment"] = self.comment
        if self.replacement_id is not None:
            headers["replacement_id"] = self.replacement_id
        return self._envelope(
            IssueCredentialType.ISSUE_CREDENTIAL,
            thread=self._reply_thread(),
            headers=headers,
            attachments=[embed_base64(CREDENTIAL_ATTACHMENT_ID, JSON_MEDIA_TYPE, a) for a in self.attachments],
        )

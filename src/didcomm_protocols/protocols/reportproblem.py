"""
Report Problem — how to report errors and warnings interoperably.
<https://github.com/hyperledger/aries-rfcs/blob/main/features/0035-report-problem/README.md>
<https://identity.foundation/didcomm-messaging/spec/#problem-reports>

Version 2.0 is built by default; 1.0 is available through ``with_version``.
Any received message may be reported on: its id becomes the thid whatever its
type is.
"""

from typing import Any, Optional, Sequence, Union

from didcomm_protocols.defaults import DEFAULT_LANG
from didcomm_protocols.errors import DIDCommError
from didcomm_protocols.linkage import Role, derive_thread
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import ReportProblemType
from didcomm_protocols.protocols.base import ResponseBuilder
from didcomm_protocols.serialization import compact_json

_VERSIONS = {
    "1.0": ReportProblemType.PROBLEM_REPORT_V1,
    "2.0": ReportProblemType.PROBLEM_REPORT_V2,
}


def problem_code(error: DIDCommError) -> str:
    """Problem code for a builder error, e.g. ``e.p.msg.missing-required-field``."""
    return "e.p.msg." + error.code.replace("_", "-")


class ReportProblemBuilder(ResponseBuilder):
    version: ReportProblemType = ReportProblemType.PROBLEM_REPORT_V2
    code: Optional[str] = None
    comment: Optional[str] = None
    args: Optional[tuple[str, ...]] = None
    escalate_to: Optional[str] = None
    ack: Optional[tuple[str, ...]] = None
    description: Optional[str] = None
    problem_items: tuple[Any, ...] = ()

    def with_version(self, version: Union[ReportProblemType, str]) -> "ReportProblemBuilder":
        """Accepts a ReportProblemType or a bare version string ("1.0", "2.0")."""
        if not isinstance(version, ReportProblemType):
            version = _VERSIONS.get(version) or ReportProblemType(version)
        return self._set(version=version)

    def with_code(self, code: str) -> "ReportProblemBuilder":
        return self._set(code=code)

    def with_comment(self, comment: str) -> "ReportProblemBuilder":
        return self._set(comment=comment)

    def with_args(self, args: Sequence[str]) -> "ReportProblemBuilder":
        return self._set(args=tuple(args))

    def with_escalate_to(self, escalate_to: str) -> "ReportProblemBuilder":
        return self._set(escalate_to=escalate_to)

    def with_ack(self, ack: Sequence[str]) -> "ReportProblemBuilder":
        return self._set(ack=tuple(ack))

    def with_description(self, description: str) -> "ReportProblemBuilder":
        return self._set(description=description)

    def with_problem_item(self, problem_item: Any) -> "ReportProblemBuilder":
        return self._set(problem_items=self.problem_items + (problem_item,))

    def with_error(self, error: DIDCommError) -> "ReportProblemBuilder":
        return self._set(code=problem_code(error), comment=str(error))

    def build(self) -> Envelope:
        if self.version == ReportProblemType.PROBLEM_REPORT_V1:
            return self.build_v1()
        return self.build_v2()

    def build_v2(self) -> Envelope:
        code = self._required("code", self.code)
        body: dict[str, Any] = {"code": code}
        if self.comment is not None:
            body["comment"] = self.comment
        if self.args is not None:
            body["args"] = list(self.args)
        if self.escalate_to is not None:
            body["escalate_to"] = self.escalate_to
        headers: dict[str, str] = {}
        if self.ack is not None:
            headers["ack"] = compact_json(list(self.ack))
        return self._envelope(
            ReportProblemType.PROBLEM_REPORT_V2,
            thread=derive_thread(self.message, Role.PROBLEM_REPORT),
            body=body,
            headers=headers,
        )

    def build_v1(self) -> Envelope:
        body: dict[str, Any] = {}
        if self.description is not None or self.code is not None:
            description: dict[str, str] = {}
            if self.description is not None:
                description[DEFAULT_LANG] = self.description
            if self.code is not None:
                description["code"] = self.code
            body["description"] = description
        if self.problem_items:
            body["problem_items"] = list(self.problem_items)
        return self._envelope(
            ReportProblemType.PROBLEM_REPORT_V1,
            thread=derive_thread(self.message, Role.PROBLEM_REPORT),
            body=body,
        )

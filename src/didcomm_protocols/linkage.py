"""
Thread linkage rules.

``thid`` names the logical exchange and never changes once the first
responding step set it. ``pthid`` names the thread that caused the current
step to exist.
"""

from enum import Enum
from typing import NamedTuple, Optional

from didcomm_protocols.errors import MissingPredecessor, MissingRequiredField
from didcomm_protocols.identifiers import IdFactory, new_id
from didcomm_protocols.models.envelope import Envelope


class Role(str, Enum):
    INITIATOR = "initiator"
    FIRST_RESPONSE = "first-response-to-invitation"
    RESPONSE = "response"
    COMPLETE = "complete"
    PROBLEM_REPORT = "problem-report"
    PING_RESPONSE = "ping-response"
    REPLY = "reply"


class ThreadIds(NamedTuple):
    thid: Optional[str]
    pthid: Optional[str]


def derive_thread(
    predecessor: Optional[Envelope],
    role: Role,
    *,
    thid_override: Optional[str] = None,
    id_factory: IdFactory = new_id,
) -> ThreadIds:
    """Compute ``(thid, pthid)`` for a new message in ``role``.

    Raises MissingPredecessor when the role needs a prior message that was not
    given, and MissingRequiredField when completing on a message without thid.
    """
    if role is Role.INITIATOR:
        return ThreadIds(None, None)

    if role is Role.FIRST_RESPONSE:
        # Requests may be built without the invitation at hand; start a fresh thread then.
        thid = predecessor.id if predecessor is not None and predecessor.id else id_factory()
        return ThreadIds(thid, thid)

    if role is Role.PROBLEM_REPORT:
        return ThreadIds(predecessor.id if predecessor is not None else None, None)

    if role is Role.PING_RESPONSE:
        if thid_override is not None:
            return ThreadIds(thid_override, None)
        if predecessor is None:
            raise MissingPredecessor("A ping-response needs the ping or an explicit thid")
        return ThreadIds(predecessor.id, None)

    if predecessor is None:
        raise MissingPredecessor(f"Role {role.value!r} requires a predecessor message")

    if role is Role.RESPONSE:
        thid = predecessor.id or id_factory()
        return ThreadIds(thid, thid)

    if role is Role.COMPLETE:
        if not predecessor.thid:
            raise MissingRequiredField("thid", "Predecessor carries no thid to complete the thread")
        return ThreadIds(predecessor.thid, predecessor.id)

    # Role.REPLY
    return ThreadIds(predecessor.thid or predecessor.id, None)

"""
Shared builder plumbing.

Builders are frozen models: every ``with_*`` setter returns an updated copy, so
a partially configured builder can be reused without being changed under you.
"""

from typing import Any, Iterable, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from didcomm_protocols.errors import MissingRequiredField
from didcomm_protocols.identifiers import IdFactory, new_id
from didcomm_protocols.linkage import Role, ThreadIds, derive_thread
from didcomm_protocols.models.envelope import Attachment, Envelope
from didcomm_protocols.models.message_types import MessageType

B = TypeVar("B", bound="MessageBuilder")
T = TypeVar("T")

NO_THREAD = ThreadIds(None, None)


class MessageBuilder(BaseModel):
    id_factory: IdFactory = Field(default=new_id, exclude=True)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def _set(self: B, **changes: Any) -> B:
        return self.model_copy(update=changes)

    def with_id_factory(self: B, id_factory: IdFactory) -> B:
        return self._set(id_factory=id_factory)

    @staticmethod
    def _required(name: str, value: Optional[T]) -> T:
        if value is None:
            raise MissingRequiredField(name)
        return value

    def _envelope(
        self,
        message_type: MessageType,
        *,
        thread: ThreadIds = NO_THREAD,
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
        attachments: Iterable[Attachment] = (),
        created_time: Optional[int] = None,
    ) -> Envelope:
        return Envelope(
            id=self.id_factory(),
            type=message_type.value,
            thid=thread.thid,
            pthid=thread.pthid,
            created_time=created_time,
            body={} if body is None else body,
            header_fields=headers or {},
            attachments=tuple(attachments),
        )


class ResponseBuilder(MessageBuilder):
    """Builder that may continue from a received message."""

    message: Optional[Envelope] = None

    def with_message(self: B, message: Union[Envelope, dict[str, Any], str]) -> B:
        """Set the predecessor; raw JSON text or a decoded dict is parsed first."""
        if isinstance(message, str):
            message = Envelope.from_json(message)
        elif isinstance(message, dict):
            message = Envelope.from_dict(message)
        return self._set(message=message)

    def _reply_thread(self) -> ThreadIds:
        if self.message is None:
            return NO_THREAD
        return derive_thread(self.message, Role.REPLY, id_factory=self.id_factory)

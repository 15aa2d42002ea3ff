"""
Basic Message 2.0 — a stateless, single-message user messaging protocol.
<https://didcomm.org/basicmessage/2.0/>
"""

from typing import Optional

from pydantic import Field

from didcomm_protocols.defaults import DEFAULT_LANG
from didcomm_protocols.identifiers import Clock, epoch_seconds
from didcomm_protocols.models.envelope import Envelope
from didcomm_protocols.models.message_types import BasicMessageType
from didcomm_protocols.protocols.base import ResponseBuilder


class BasicMessageBuilder(ResponseBuilder):
    content: Optional[str] = None
    lang: str = DEFAULT_LANG
    clock: Clock = Field(default=epoch_seconds, exclude=True)

    def with_content(self, content: str) -> "BasicMessageBuilder":
        return self._set(content=content)

    def with_lang(self, lang: str) -> "BasicMessageBuilder":
        return self._set(lang=lang)

    def with_clock(self, clock: Clock) -> "BasicMessageBuilder":
        return self._set(clock=clock)

    def build(self) -> Envelope:
        content = self._required("content", self.content)
        return self._envelope(
            BasicMessageType.MESSAGE,
            thread=self._reply_thread(),
            body={"content": content},
            headers={"lang": self.lang},
            created_time=self.clock(),
        )

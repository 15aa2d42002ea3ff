import json

import pytest

from didcomm_protocols import BasicMessageBuilder, Envelope, MissingRequiredField
from didcomm_protocols.models.message_types import BasicMessageType


def test_build_message():
    message = BasicMessageBuilder(clock=lambda: 1700000000).with_content("Hello World").build()
    assert message.type == BasicMessageType.MESSAGE.value
    assert message.body == {"content": "Hello World"}
    assert message.header("lang") == "en"
    assert message.created_time == 1700000000
    assert json.loads(message.to_json())["created_time"] == 1700000000


def test_lang_override():
    message = BasicMessageBuilder().with_content("Hallo").with_lang("de").build()
    assert message.header("lang") == "de"


def test_reply_threads_on_received_message():
    received = Envelope(id="m1", type=BasicMessageType.MESSAGE.value)
    reply = BasicMessageBuilder().with_message(received).with_content("hi back").build()
    assert reply.thid == "m1"


def test_content_required():
    with pytest.raises(MissingRequiredField) as exc:
        BasicMessageBuilder().build()
    assert exc.value.field == "content"


def test_same_input_same_message():
    builder = BasicMessageBuilder(clock=lambda: 5).with_content("x")
    first = builder.with_id_factory(lambda: "fixed").build()
    second = builder.with_id_factory(lambda: "fixed").build()
    assert first == second

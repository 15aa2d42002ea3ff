import pytest

from didcomm_protocols import BasicMessageBuilder, MissingPredecessor, TrustPingBuilder, UnsupportedPredecessorType
from didcomm_protocols.models.message_types import TrustPingType


def test_build_ping():
    ping = TrustPingBuilder().build()
    assert ping.type == TrustPingType.PING.value
    assert ping.body == {"response_requested": True}
    assert ping.thid is None


def test_ping_without_response():
    ping = TrustPingBuilder().with_response_requested(False).build()
    assert ping.body == {"response_requested": False}


def test_build_response():
    ping = TrustPingBuilder().build()
    response = TrustPingBuilder().with_message(ping).build()
    assert response.type == TrustPingType.PING_RESPONSE.value
    assert response.thid == ping.id
    assert response.id != ping.id


def test_explicit_thid_wins():
    ping = TrustPingBuilder().build()
    response = TrustPingBuilder().with_message(ping).with_thid("42").build()
    assert response.thid == "42"


def test_response_from_thid_only():
    response = TrustPingBuilder().with_thid("42").build_response()
    assert response.type == TrustPingType.PING_RESPONSE.value
    assert response.thid == "42"


def test_response_needs_ping_or_thid():
    with pytest.raises(MissingPredecessor):
        TrustPingBuilder().build_response()


def test_only_pings_are_answered():
    message = BasicMessageBuilder().with_content("hello").build()
    with pytest.raises(UnsupportedPredecessorType):
        TrustPingBuilder().with_message(message).build()


def test_injected_ids(ids):
    builder = TrustPingBuilder(id_factory=ids)
    ping = builder.build()
    response = builder.with_message(ping).build()
    assert (ping.id, response.id, response.thid) == ("id-1", "id-2", "id-1")

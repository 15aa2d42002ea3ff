import json

import pytest

from didcomm_protocols import (
    DidExchangeBuilder,
    Envelope,
    InvitationBuilder,
    MissingPredecessor,
    MissingRequiredField,
    TrustPingBuilder,
    UnsupportedPredecessorType,
)
from didcomm_protocols.models.message_types import DidExchangeType

DID = "did:key:z6MkpFZ86WuUpihn1mTRbpBCGE6YpCvsBYtZQYnd9jcuAUup"


@pytest.fixture
def invitation(ids):
    return (
        InvitationBuilder(id_factory=ids)
        .with_goal("to create a relationship")
        .with_goal_code("aries.rel.build")
        .build()
    )


@pytest.fixture
def builder(ids, did_doc):
    return DidExchangeBuilder(id_factory=ids).with_did(DID).with_did_doc(did_doc)


def test_build_request(invitation, builder, did_doc):
    request = builder.with_message(invitation).build()
    assert request.type == DidExchangeType.REQUEST.value
    assert request.header("goal") == "To create a relationship"
    assert request.header("did") == DID
    assert request.header("did_doc~attach") == json.dumps(did_doc, indent=2)
    assert json.loads(request.header("did_doc~attach")) == did_doc


def test_three_hop_exchange_keeps_threads(invitation, builder):
    request = builder.with_message(invitation).build()
    response = builder.with_message(request).build()
    complete = builder.with_message(response).build()

    assert request.thid == request.pthid == invitation.id
    assert response.type == DidExchangeType.RESPONSE.value
    assert response.thid == response.pthid == request.id
    assert complete.type == DidExchangeType.COMPLETE.value
    assert complete.thid == response.thid
    assert complete.pthid == response.id
    assert len({invitation.id, request.id, response.id, complete.id}) == 4


def test_exchange_with_deterministic_ids(invitation, builder):
    request = builder.with_message(invitation).build()
    response = builder.with_message(request).build()
    assert (invitation.id, request.id, response.id) == ("id-1", "id-2", "id-3")


def test_continues_from_raw_json(invitation, builder):
    request = builder.with_message(invitation.to_json()).build()
    assert request.thid == invitation.id
    response = builder.with_message(request.to_dict()).build()
    assert response.thid == request.id


def test_complete_needs_no_did():
    response = Envelope(id="resp", type=DidExchangeType.RESPONSE.value, thid="req", pthid="req")
    complete = DidExchangeBuilder().with_message(response).build()
    assert complete.thid == "req"
    assert complete.pthid == "resp"
    assert complete.header_fields == {}


def test_request_without_invitation_starts_fresh_thread(builder):
    request = builder.build_request()
    assert request.thid == request.pthid
    assert request.thid is not None


class TestErrors:
    def test_no_predecessor(self, builder):
        with pytest.raises(MissingPredecessor):
            builder.build()

    def test_unrelated_predecessor(self, builder):
        with pytest.raises(UnsupportedPredecessorType):
            builder.with_message(TrustPingBuilder().build()).build()

    def test_missing_did(self, invitation, did_doc):
        with pytest.raises(MissingRequiredField) as exc:
            DidExchangeBuilder().with_message(invitation).with_did_doc(did_doc).build()
        assert exc.value.field == "did"

    def test_missing_did_doc(self, invitation):
        with pytest.raises(MissingRequiredField) as exc:
            DidExchangeBuilder().with_message(invitation).with_did(DID).build()
        assert exc.value.field == "did_doc"

    def test_response_without_request(self, builder):
        with pytest.raises(MissingPredecessor):
            builder.build_response()

    def test_complete_on_response_without_thid(self):
        response = Envelope(type=DidExchangeType.RESPONSE.value)
        with pytest.raises(MissingRequiredField):
            DidExchangeBuilder().with_message(response).build()

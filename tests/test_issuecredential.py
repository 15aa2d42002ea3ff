import base64
import json

import pytest

from didcomm_protocols import (
    CredentialAttribute,
    CredentialPreview,
    IssueCredentialBuilder,
    MalformedMessage,
    MissingPredecessor,
    MissingRequiredField,
    TrustPingBuilder,
    UnsupportedPredecessorType,
    decode_attachment,
)
from didcomm_protocols.models.message_types import IssueCredentialType

DID = "did:key:z6MkpFZ86WuUpihn1mTRbpBCGE6YpCvsBYtZQYnd9jcuAUup"


@pytest.fixture
def preview():
    return CredentialPreview(attributes=[
        CredentialAttribute(name="name", value="Alice"),
        CredentialAttribute.binary("photo", b"\x89PNG\r\n", "image/png"),
    ])


@pytest.fixture
def offer(preview):
    return (
        IssueCredentialBuilder()
        .with_comment("a credential for you")
        .with_goal_code("issue-vc")
        .with_credential_preview(preview)
        .build_offer_credential()
    )


def test_build_offer(offer, preview):
    assert offer.type == IssueCredentialType.OFFER_CREDENTIAL.value
    assert offer.header("comment") == "a credential for you"
    assert offer.header("goal_code") == "issue-vc"
    assert json.loads(offer.header("credential_preview")) == preview.to_dict()
    assert offer.header("replacement_id") is None


def test_offer_preview_wire_form(offer):
    raw = json.loads(offer.header("credential_preview"))
    assert raw["type"] == "https://didcomm.org/issue-credential/2.1/credential-preview"
    assert raw["attributes"][0] == {"name": "name", "mime-type": None, "value": "Alice"}
    assert raw["attributes"][1]["mime-type"] == "image/png"


def test_offer_with_replacement_id(preview):
    offer = (
        IssueCredentialBuilder()
        .with_comment("c")
        .with_goal_code("g")
        .with_credential_preview(preview)
        .with_replacement_id("r-1")
        .build_offer_credential()
    )
    assert offer.header("replacement_id") == "r-1"


@pytest.mark.parametrize("missing", ["comment", "goal_code", "credential_preview"])
def test_offer_requires_fields(preview, missing):
    fields = {"comment": "c", "goal_code": "g", "credential_preview": preview}
    del fields[missing]
    with pytest.raises(MissingRequiredField) as exc:
        IssueCredentialBuilder(**fields).build_offer_credential()
    assert exc.value.field == missing


def test_propose_from_offer(offer, did_doc):
    propose = IssueCredentialBuilder().with_message(offer).with_did(DID).with_did_doc(did_doc).build()
    assert propose.type == IssueCredentialType.PROPOSE_CREDENTIAL.value
    assert propose.header("goal") == "To create a relationship"
    assert propose.header("did") == DID
    assert json.loads(propose.header("did_doc~attach")) == did_doc
    assert propose.thid == offer.id


def test_propose_requires_did(offer):
    with pytest.raises(MissingRequiredField):
        IssueCredentialBuilder().with_message(offer).build()


def test_dispatch_errors():
    with pytest.raises(MissingPredecessor):
        IssueCredentialBuilder().build()
    with pytest.raises(UnsupportedPredecessorType):
        IssueCredentialBuilder().with_message(TrustPingBuilder().build()).build()


def test_build_issue_credential():
    issued = IssueCredentialBuilder().with_attachment("Credential").build_issue_credential()
    assert issued.type == IssueCredentialType.ISSUE_CREDENTIAL.value
    attachments = list(issued.iter_attachments())
    assert len(attachments) == 1
    raw = json.loads(issued.to_json())
    assert base64.b64decode(raw["attachments"][0]["data"]["base64"]).decode("utf-8") == '"Credential"'
    assert decode_attachment(attachments[0]) == "Credential"
    assert attachments[0].media_type == "application/json"


def test_issue_credential_replies_on_thread(offer):
    issued = (
        IssueCredentialBuilder()
        .with_message(offer)
        .with_comment("here it is")
        .with_attachment({"credentialSubject": {"name": "Alice"}})
        .with_attachment({"credentialSubject": {"name": "Bob"}})
        .build_issue_credential()
    )
    assert issued.thid == offer.id
    assert issued.header("comment") == "here it is"
    assert [decode_attachment(a)["credentialSubject"]["name"] for a in issued.attachments] == ["Alice", "Bob"]


def test_issue_credential_requires_attachment():
    with pytest.raises(MissingRequiredField) as exc:
        IssueCredentialBuilder().build_issue_credential()
    assert exc.value.field == "attachments"


class TestCredentialAttribute:
    def test_plain_text(self):
        attribute = CredentialAttribute(name="name", value="Alice")
        assert not attribute.is_binary
        assert attribute.decoded_value() == "Alice"

    def test_binary_blob(self):
        attribute = CredentialAttribute.binary("photo", b"\x00\xffdata", "image/png")
        assert attribute.is_binary
        assert attribute.decoded_value() == b"\x00\xffdata"

    def test_unpadded_base64url(self):
        attribute = CredentialAttribute(name="b", mime_type="application/octet-stream", value="AP8")
        assert attribute.decoded_value() == b"\x00\xff"

    def test_invalid_blob(self):
        attribute = CredentialAttribute(name="b", mime_type="image/png", value="!!!!")
        with pytest.raises(MalformedMessage):
            attribute.decoded_value()

    def test_wire_alias(self):
        parsed = CredentialAttribute.model_validate({"name": "n", "mime-type": "image/png", "value": "AA"})
        assert parsed.mime_type == "image/png"


def test_offer_preview_header_keeps_non_ascii():
    preview = CredentialPreview(attributes=[CredentialAttribute(name="name", value="Zoë")])
    offer = (
        IssueCredentialBuilder()
        .with_comment("c")
        .with_goal_code("g")
        .with_credential_preview(preview)
        .build_offer_credential()
    )
    assert "Zoë" in offer.header("credential_preview")

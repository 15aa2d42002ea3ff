import pytest

from didcomm_protocols.identifiers import sequential_ids


@pytest.fixture
def ids():
    """Deterministic message ids: id-1, id-2, ..."""
    return sequential_ids("id")


@pytest.fixture
def did_doc():
    return {
        "@context": ["https://www.w3.org/ns/did/v1"],
        "id": "did:key:z6MkpFZ86WuUpihn1mTRbpBCGE6YpCvsBYtZQYnd9jcuAUup",
        "keyAgreement": [],
    }

"""Static defaults shared by the protocol builders."""

DEFAULT_LANG = "en"

# Plaintext DIDComm v2 message media type
PLAINTEXT_TYP = "application/didcomm-plain+json"
JSON_MEDIA_TYPE = "application/json"

ACCEPT = ["didcomm/v2"]

RELATIONSHIP_GOAL = "To create a relationship"

SERVICE_TYPE = "did-communication"
SERVICE_ID_SUFFIX = "#didcomm"

CREDENTIAL_PREVIEW_TYPE = "https://didcomm.org/issue-credential/2.1/credential-preview"

PRESENTATION_ATTACHMENT_ID = "presentation"
CREDENTIAL_ATTACHMENT_ID = "credential"

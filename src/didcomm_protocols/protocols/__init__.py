from didcomm_protocols.protocols.basicmessage import BasicMessageBuilder
from didcomm_protocols.protocols.didexchange import DidExchangeBuilder
from didcomm_protocols.protocols.invitation import GoalCode, InvitationBuilder
from didcomm_protocols.protocols.issuecredential import IssueCredentialBuilder
from didcomm_protocols.protocols.presentproof import PresentProofBuilder
from didcomm_protocols.protocols.reportproblem import ReportProblemBuilder, problem_code
from didcomm_protocols.protocols.trustping import TrustPingBuilder

__all__ = [
    "BasicMessageBuilder",
    "DidExchangeBuilder",
    "GoalCode",
    "InvitationBuilder",
    "IssueCredentialBuilder",
    "PresentProofBuilder",
    "ReportProblemBuilder",
    "TrustPingBuilder",
    "problem_code",
]

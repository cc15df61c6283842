"""Self-onboarding invitation: document selection per payee type."""

from __future__ import annotations

from pydantic import BaseModel, Field

from greenroom.models.onboarding import PayeeType

W4 = "W-4 (Employee's Withholding Certificate)"
I9 = "I-9 (Employment Eligibility Verification)"
W9 = "W-9 (Request for Taxpayer ID Number)"

AVAILABLE_DOCUMENTS: tuple[str, ...] = (
    W4,
    I9,
    W9,
    "Anti Harassment Policy",
    "Confidentiality Policy",
    "Wage Theft Prevention Policy",
)

MANDATORY_DOCUMENTS: dict[PayeeType, tuple[str, ...]] = {
    PayeeType.EMPLOYEE: (W4, I9),
    PayeeType.LOANOUT: (I9, W9),
    PayeeType.VENDOR: (W9,),
}

DEFAULT_SUBJECT = "Complete Your Onboarding"
DEFAULT_MESSAGE = (
    "Please complete your onboarding by following the link below "
    "and submitting the required documents."
)


def mandatory_documents(payee_type: PayeeType) -> tuple[str, ...]:
    return MANDATORY_DOCUMENTS[payee_type]


def optional_documents(payee_type: PayeeType) -> tuple[str, ...]:
    required = MANDATORY_DOCUMENTS[payee_type]
    return tuple(doc for doc in AVAILABLE_DOCUMENTS if doc not in required)


class Invitation(BaseModel):
    """What the payee receives when invited to onboard themselves."""

    subject: str = DEFAULT_SUBJECT
    message: str = DEFAULT_MESSAGE
    documents: list[str] = Field(default_factory=list)

    @classmethod
    def for_payee(cls, payee_type: PayeeType) -> "Invitation":
        return cls(documents=list(mandatory_documents(payee_type)))


def toggle_document(invitation: Invitation, payee_type: PayeeType, document: str) -> Invitation:
    """Add or drop an optional document. Mandatory documents stay selected."""
    if document in MANDATORY_DOCUMENTS[payee_type]:
        return invitation
    if document not in AVAILABLE_DOCUMENTS:
        raise ValueError(f"Unknown document {document!r}")
    if document in invitation.documents:
        documents = [doc for doc in invitation.documents if doc != document]
    else:
        documents = [*invitation.documents, document]
    return invitation.model_copy(update={"documents": documents})

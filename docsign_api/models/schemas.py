"""
DocSign API — Pydantic Data Models

Request and response bodies for the document endpoints. The Field()
descriptions and examples show up in the interactive docs at /docs.

Request fields are all optional on purpose: a missing "content" or
"signature" is a 400 with a specific message, decided in the route,
not a generic validation error.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

class DocumentOut(BaseModel):
    """A document as the API returns it.

    signature is null until the document is signed. signed is derived
    from it; the browser client uses it to pick which cards get a Sign button."""

    id: str = Field(
        description="Registry-assigned identifier, 'doc-' followed by a counter.",
        examples=["doc-4"],
    )
    content: str = Field(
        description="Document body, usually an XML payload.",
        examples=["<document><title>Contract</title></document>"],
    )
    signature: str | None = Field(
        default=None,
        description="Signature string, or null if the document is unsigned.",
        examples=[None],
    )
    signed: bool = Field(
        default=False,
        description="True once a signature has been attached.",
        examples=[False],
    )

    @classmethod
    def from_document(cls, doc) -> "DocumentOut":
        signature = doc.signature
        return cls(id=doc.id, content=doc.content, signature=signature, signed=signature is not None)


class CreateDocumentRequest(BaseModel):
    content: str | None = Field(
        default=None,
        description="Document body. Must not be blank.",
        examples=["<document><title>Contract</title></document>"],
    )


class SignDocumentRequest(BaseModel):
    signature: str | None = Field(
        default=None,
        description="Signature to attach, e.g. a base64 CMS blob. Must not be blank.",
        examples=["MIIGfQYJKoZIhvcNAQcCoIIGbjCCBmoCAQEx..."],
    )


class MessageResponse(BaseModel):
    message: str = Field(examples=["Document signed successfully"])


class ErrorResponse(BaseModel):
    error: str = Field(examples=["Document not found or already signed"])

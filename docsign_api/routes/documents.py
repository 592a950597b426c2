"""
/api/documents -- List, create, and sign documents.

The registry is not a module global. create_app() puts it on app.state
and each handler gets it through the get_registry dependency, so tests
can build an app around their own registry.

Signing is sign-once: the first successful PUT wins and later ones get
a 400. "Not found" and "already signed" share one error message.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from docsign_api.errors import SIGN_FAILED, SIGNATURE_REQUIRED, error_response
from docsign_api.models.schemas import (
    CreateDocumentRequest,
    DocumentOut,
    ErrorResponse,
    MessageResponse,
    SignDocumentRequest,
)
from docsign_api.store import DocumentRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["Documents"])


def get_registry(request: Request) -> DocumentRegistry:
    return request.app.state.registry


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


@router.get(
    "",
    response_model=list[DocumentOut],
    summary="List documents",
    description="Every document in the registry, signed or not, in creation order.",
)
async def list_documents(registry: DocumentRegistry = Depends(get_registry)) -> list[DocumentOut]:
    return [DocumentOut.from_document(doc) for doc in registry.list_all()]


@router.post(
    "",
    response_model=DocumentOut,
    summary="Create a document",
    description="Stores a new unsigned document. Blank content is rejected with an empty 400.",
    responses={400: {"description": "content missing or blank (empty body)"}},
)
async def create_document(
    req: CreateDocumentRequest | None = None,
    registry: DocumentRegistry = Depends(get_registry),
):
    content = req.content if req else None
    if _blank(content):
        logger.info("Rejected document create: blank content")
        return Response(status_code=400)

    doc = registry.create(content)
    return DocumentOut.from_document(doc)


@router.put(
    "/{doc_id}/sign",
    response_model=MessageResponse,
    summary="Sign a document",
    description=(
        "Attaches a signature to an unsigned document. A document can be signed once; "
        "signing an unknown or already signed document returns the same 400."
    ),
    responses={400: {"model": ErrorResponse}},
)
async def sign_document(
    doc_id: str,
    req: SignDocumentRequest | None = None,
    registry: DocumentRegistry = Depends(get_registry),
):
    signature = req.signature if req else None
    if _blank(signature):
        logger.info("Rejected sign for %s: no signature", doc_id)
        return error_response(SIGNATURE_REQUIRED)

    if not registry.sign(doc_id, signature):
        logger.info("Rejected sign for %s: not found or already signed", doc_id)
        return error_response(SIGN_FAILED)

    return MessageResponse(message="Document signed successfully")

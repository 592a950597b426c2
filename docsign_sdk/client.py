"""
DocSign — Python SDK

Lightweight client for the DocSign demo API.

Usage:

    from docsign_sdk.client import DocSignClient

    ds = DocSignClient("http://localhost:8000")

    doc = ds.create_document("<document><title>NDA</title></document>")
    print(doc.id, doc.signed)          # doc-4 False

    ds.sign_document(doc.id, cms_signature)

    for d in ds.list_documents():
        print(d.id, "signed" if d.signed else "unsigned")

A second sign_document() on the same id raises DocSignError with
status_code 400 and body {"error": "Document not found or already signed"}.

Requirements: requests
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

__version__ = "0.1.0"

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30


# ── Result types ──────────────────────────────────────────────────────────


@dataclass
class DocumentResult:
    """A document returned by /api/documents."""

    id: str
    content: str
    signature: Optional[str] = None
    signed: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "DocumentResult":
        signature = data.get("signature")
        return cls(
            id=data["id"],
            content=data["content"],
            signature=signature,
            signed=data.get("signed", signature is not None),
            raw=data,
        )


# ── Exceptions ────────────────────────────────────────────────────────────


class DocSignError(Exception):
    """Raised for any API response with status >= 400."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ── Client ────────────────────────────────────────────────────────────────


class DocSignClient:
    """
    Client for the DocSign demo API.

    Args:
        base_url: API base URL. Defaults to http://localhost:8000.
        timeout: Request timeout in seconds. Defaults to 30.
        session: Optional requests-compatible session to send requests with.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        kwargs.setdefault("timeout", self.timeout)
        resp = self._session.request(method, url, **kwargs)
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            raise DocSignError(
                f"API error {resp.status_code}: {body}",
                status_code=resp.status_code,
                body=body,
            )
        return resp.json()

    def list_documents(self) -> List[DocumentResult]:
        data = self._request("GET", "/api/documents")
        return [DocumentResult.from_json(d) for d in data]

    def create_document(self, content: str) -> DocumentResult:
        """Create an unsigned document. Blank content raises DocSignError (400)."""
        data = self._request("POST", "/api/documents", json={"content": content})
        return DocumentResult.from_json(data)

    def sign_document(self, doc_id: str, signature: str) -> str:
        """
        Attach a signature to a document.

        Args:
            doc_id: Document id, e.g. "doc-1".
            signature: Signature string to store.

        Returns:
            The server's confirmation message.

        Raises:
            DocSignError: signature blank, document unknown, or already signed.
        """
        data = self._request(
            "PUT",
            f"/api/documents/{doc_id}/sign",
            json={"signature": signature},
        )
        return data["message"]

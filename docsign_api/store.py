"""
In-memory document registry.

There is no database. Documents live in a dict owned by a single
DocumentRegistry instance, which the app creates at startup and hands to
the route handlers. Data is lost on restart and the sample documents are
seeded again.

Every read and write goes through one lock, so concurrent requests can't
hand out the same id twice or sign the same document twice.
"""

import itertools
import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ID_PREFIX = "doc-"

# Seeded on startup so the demo has something to sign.
SAMPLE_DOCUMENTS = (
    "<document><title>Sample Document 1</title>"
    "<content>This is the first sample document for signing.</content></document>",
    "<document><title>Sample Document 2</title>"
    "<content>This is the second sample document for signing.</content></document>",
    "<document><title>Sample Document 3</title>"
    "<content>This is the third sample document for signing.</content></document>",
)


@dataclass
class Document:
    id: str
    content: str
    signature: str | None = None      # None until signed, then set once

    @property
    def signed(self) -> bool:
        return self.signature is not None


class DocumentRegistry:
    """Owns every Document plus the counter that names them.

    The counter starts at 1 and is shared by seeding and create(), so the
    first document created after the three samples is "doc-4".
    """

    def __init__(self, seed: bool = True):
        self._documents: dict[str, Document] = {}
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        if seed:
            self.seed()

    def seed(self) -> None:
        for content in SAMPLE_DOCUMENTS:
            self.create(content)
        logger.info("Seeded %d sample documents", len(SAMPLE_DOCUMENTS))

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def list_all(self) -> list[Document]:
        with self._lock:
            return list(self._documents.values())

    def get(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._documents.get(doc_id)

    def create(self, content: str) -> Document:
        """Store a new unsigned document. Blank content is the caller's problem."""
        with self._lock:
            doc_id = f"{ID_PREFIX}{next(self._counter)}"
            doc = Document(id=doc_id, content=content)
            self._documents[doc_id] = doc
        logger.info("Created document %s", doc_id)
        return doc

    def sign(self, doc_id: str, signature: str) -> bool:
        """Attach a signature if the document exists and is still unsigned.

        Returns False both when the id is unknown and when the document was
        already signed. The existing signature is never overwritten.
        """
        with self._lock:
            doc = self._documents.get(doc_id)
            if doc is None or doc.signed:
                return False
            doc.signature = signature
        logger.info("Signed document %s", doc_id)
        return True

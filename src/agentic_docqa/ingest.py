# src/agentic_docqa/ingest.py
"""Thin ingestion collaborator: loads and splits a source file, then writes the
chunks into both indices.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore, VectorStore
from langchain_text_splitters import RecursiveCharacterTextSplitter

from agentic_docqa.retrieval.sources import BM25LexicalSource, VectorStoreSemanticSource

logger = logging.getLogger(__name__)

CHUNK_SIZE = 800
CHUNK_OVERLAP = 200


def make_loader(path: Path) -> BaseLoader:
    if path.suffix.lower() == ".pdf":
        return PyPDFLoader(str(path))
    return TextLoader(str(path), encoding="utf-8")


async def load_and_split(path: Union[str, Path]) -> List[Document]:
    """Chunks of one source file, each tagged with ``metadata["source"] = path``."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")

    raw_docs = await make_loader(path).aload()
    splitter = RecursiveCharacterTextSplitter(chunk_size=CHUNK_SIZE, chunk_overlap=CHUNK_OVERLAP)
    chunks = splitter.split_documents(raw_docs)

    # Loader metadata (page numbers etc.) is replaced by the source id
    source_id = str(path)
    for chunk in chunks:
        chunk.metadata = {"source": source_id}

    logger.info(f"Split {len(chunks)} chunks from {source_id}")
    return chunks


class Corpus:
    """The document collection as seen by retrieval: a semantic and a lexical index over the same chunks."""

    def __init__(self, vector_store: VectorStore, lexical: Optional[BM25LexicalSource] = None):
        self.semantic = VectorStoreSemanticSource(vector_store)
        self.lexical = lexical or BM25LexicalSource()

    @classmethod
    def in_memory(cls, embeddings: Embeddings) -> "Corpus":
        return cls(InMemoryVectorStore(embedding=embeddings))

    async def add_documents(self, documents: Sequence[Document]) -> int:
        docs = [d for d in documents if d.page_content and d.page_content.strip()]
        if not docs:
            return 0

        await self.semantic.add_documents(docs)
        self.lexical.add_texts(d.page_content for d in docs)

        logger.info(f"Ingested {len(docs)} chunks into vector and BM25 indices")
        return len(docs)

    async def add_texts(self, texts: Iterable[str], *, source_id: str) -> int:
        return await self.add_documents([Document(page_content=t, metadata={"source": source_id}) for t in texts])

    async def add_path(self, path: Union[str, Path]) -> int:
        """Load a PDF or text file, split it into overlapping chunks and index them."""
        return await self.add_documents(await load_and_split(path))

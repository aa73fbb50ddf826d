"""
ElevenLabs Python Client - Knowledge Base Resource

This module provides methods for managing knowledge base documents and
their RAG indexes.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class KnowledgeBaseResource(BaseResource):
    """
    Resource for knowledge base documents.

    Documents can be created from a URL, raw text or an uploaded file, and
    indexed for retrieval-augmented generation.

    Example:
        >>> doc = client.knowledge_base.create_from_url("https://example.com/faq")
        >>> client.knowledge_base.compute_rag_index(doc["id"], model="e5_mistral_7b_instruct")
    """

    def list(
        self,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        types: Optional[List[str]] = None,
        show_only_owned_documents: Optional[bool] = None,
        sort_by: Optional[str] = None,
        sort_direction: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List knowledge base documents.

        Args:
            page_size: Number of documents per page
            search: Filter by name prefix
            types: Document types to include (url, file, text); sent as repeated keys
            show_only_owned_documents: Exclude documents shared with the user
            sort_by: Field to sort by
            sort_direction: Sort direction (asc, desc)
            cursor: Pagination cursor
        """
        params = {
            "page_size": page_size,
            "search": search,
            "types": types,
            "show_only_owned_documents": show_only_owned_documents,
            "sort_by": sort_by,
            "sort_direction": sort_direction,
            "cursor": cursor,
        }
        return self._get(Endpoints.KNOWLEDGE_BASE, params=params)

    def get(self, document_id: str, agent_id: Optional[str] = None) -> Dict[str, Any]:
        self._require(document_id=document_id)
        path = self._path(Endpoints.KNOWLEDGE_BASE_DOCUMENT, document_id=document_id)
        return self._get(path, params={"agent_id": agent_id})

    def update(self, document_id: str, name: str) -> Dict[str, Any]:
        """Rename a document."""
        self._require(document_id=document_id, name=name)
        path = self._path(Endpoints.KNOWLEDGE_BASE_DOCUMENT, document_id=document_id)
        return self._patch(path, json={"name": name})

    def delete(self, document_id: str, force: Optional[bool] = None) -> Dict[str, Any]:
        """
        Delete a document.

        Args:
            document_id: The document's unique identifier
            force: Delete even if agents still depend on the document

        Example:
            >>> client.knowledge_base.delete("doc123", force=True)
        """
        self._require(document_id=document_id)
        path = self._path(Endpoints.KNOWLEDGE_BASE_DOCUMENT, document_id=document_id)
        return self._delete(path, params={"force": force})

    def create_from_url(self, url: str, name: Optional[str] = None) -> Dict[str, Any]:
        """Create a document by scraping a web page."""
        self._require(url=url)
        body: Dict[str, Any] = {"url": url}
        if name is not None:
            body["name"] = name
        return self._post(Endpoints.KNOWLEDGE_BASE_URL, json=body)

    def create_from_text(self, text: str, name: Optional[str] = None) -> Dict[str, Any]:
        self._require(text=text)
        body: Dict[str, Any] = {"text": text}
        if name is not None:
            body["name"] = name
        return self._post(Endpoints.KNOWLEDGE_BASE_TEXT, json=body)

    def create_from_file(
        self,
        file: Union[BinaryIO, bytes],
        filename: str,
        name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a document from an uploaded file.

        Args:
            file: Open binary file or raw bytes (pdf, txt, docx, html, epub)
            filename: Name of the uploaded file, used to guess its MIME type
            name: Display name of the document
        """
        self._require(file=file, filename=filename)
        fields = {"file": file_part(file, filename), "name": name}
        return self._post_multipart(Endpoints.KNOWLEDGE_BASE_FILE, fields)

    def compute_rag_index(self, document_id: str, model: str) -> Dict[str, Any]:
        """
        Start (or look up) RAG indexing of a document.

        Returns:
            Response with the index ``status`` and ``progress_percentage``
        """
        self._require(document_id=document_id, model=model)
        path = self._path(Endpoints.KNOWLEDGE_BASE_RAG_INDEX, document_id=document_id)
        return self._post(path, json={"model": model})

    def get_rag_index(self, document_id: str) -> Dict[str, Any]:
        self._require(document_id=document_id)
        return self._get(self._path(Endpoints.KNOWLEDGE_BASE_RAG_INDEX, document_id=document_id))

    def delete_rag_index(self, document_id: str, rag_index_id: str) -> Dict[str, Any]:
        self._require(document_id=document_id, rag_index_id=rag_index_id)
        path = self._path(
            Endpoints.KNOWLEDGE_BASE_RAG_INDEX_ITEM,
            document_id=document_id,
            rag_index_id=rag_index_id,
        )
        return self._delete(path)

    def get_rag_index_overview(self) -> Dict[str, Any]:
        """Get the RAG index usage of the whole workspace."""
        return self._get(Endpoints.KNOWLEDGE_BASE_RAG_OVERVIEW)

    def get_dependent_agents(
        self,
        document_id: str,
        page_size: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """List the agents that use a document."""
        self._require(document_id=document_id)
        path = self._path(Endpoints.KNOWLEDGE_BASE_DEPENDENT_AGENTS, document_id=document_id)
        return self._get(path, params={"page_size": page_size, "cursor": cursor})

    def get_content(self, document_id: str) -> Any:
        """Get the extracted content of a document."""
        self._require(document_id=document_id)
        return self._get(self._path(Endpoints.KNOWLEDGE_BASE_CONTENT, document_id=document_id))

    def get_chunk(self, document_id: str, chunk_id: str) -> Dict[str, Any]:
        self._require(document_id=document_id, chunk_id=chunk_id)
        path = self._path(
            Endpoints.KNOWLEDGE_BASE_CHUNK, document_id=document_id, chunk_id=chunk_id
        )
        return self._get(path)

    def get_agent_knowledge_base_size(self, agent_id: str) -> Dict[str, Any]:
        """Get the number of knowledge base pages attached to an agent."""
        self._require(agent_id=agent_id)
        return self._get(self._path(Endpoints.AGENT_KNOWLEDGE_BASE_SIZE, agent_id=agent_id))

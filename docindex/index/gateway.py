"""Qdrant-backed writes of assembled document records."""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from qdrant_client import QdrantClient
from qdrant_client.http import models as qmodels
from qdrant_client.http.exceptions import ApiException

from docindex.config import settings
from docindex.errors import IndexWriteError
from docindex.models.document import DocumentRecord, Table
from docindex.models.index import ItemRef

logger = logging.getLogger(__name__)


def point_id_for(document_id: str) -> str:
    """Generate a deterministic point identifier from the document id."""
    return str(uuid.uuid5(uuid.NAMESPACE_DNS, document_id))


class IndexGateway:
    """Creates a record per document and later attaches extracted tables to it.

    Records are stored as payload-only points; the collection carries no vectors.
    """

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        timeout: int | None = None,
        client: Optional[QdrantClient] = None,
    ) -> None:
        self.client = client or QdrantClient(
            url=url or settings.qdrant_url,
            api_key=api_key or settings.qdrant_api_key,
            timeout=timeout or settings.index_timeout,
        )

    def ensure_index(self, index_name: str) -> None:
        if self.client.collection_exists(index_name):
            return
        logger.info("Creating Qdrant collection %s", index_name)
        self.client.create_collection(collection_name=index_name, vectors_config={})

    def create(self, index_name: str, document_id: str, record: DocumentRecord) -> ItemRef:
        point_id = point_id_for(document_id)
        try:
            self.ensure_index(index_name)
            self.client.upsert(
                collection_name=index_name,
                wait=True,
                points=[
                    qmodels.PointStruct(
                        id=point_id,
                        vector={},
                        payload=record.model_dump(mode="json"),
                    )
                ],
            )
        except (ApiException, OSError) as exc:
            raise IndexWriteError(f"Failed to index {document_id} into {index_name}: {exc}") from exc
        logger.info("Indexed %s into %s as %s", document_id, index_name, point_id)
        return ItemRef(index=index_name, id=point_id, document_id=document_id)

    def update(self, item: ItemRef, tables: List[Table]) -> ItemRef:
        """Set ``attachment.tables`` on an existing record; no-op for an empty list."""
        if not tables:
            return item
        try:
            self.client.set_payload(
                collection_name=item.index,
                payload={"tables": [table.model_dump() for table in tables]},
                points=[item.id],
                key="attachment",
                wait=True,
            )
        except (ApiException, OSError) as exc:
            raise IndexWriteError(
                f"Failed to add {len(tables)} tables to {item.document_id}: {exc}"
            ) from exc
        logger.info("Added %s tables to %s", len(tables), item.document_id)
        return item

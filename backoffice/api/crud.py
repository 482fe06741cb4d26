# backoffice/api/crud.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.core.errors import NotFoundError, store_errors
from backoffice.database import get_store
from backoffice.resources import Resource
from backoffice.storage.store import ResourceStore
from backoffice.utils.filters import filter_records

logger = logging.getLogger(__name__)


def build_crud_router(resource: Resource) -> APIRouter:
    """
    List/get/create/update/delete routes for one resource under
    ``/api/<resource.path>``. Bodies are validated against the resource
    schemas before the store is touched.
    """
    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path])

    CreateSchema = resource.create_schema
    UpdateSchema = resource.update_schema
    ReadSchema = resource.read_schema

    @router.get("", response_model=List[ReadSchema])
    @router.get("/", response_model=List[ReadSchema], include_in_schema=False)
    def list_records(
        search: Optional[str] = Query(None, description="Case-insensitive text filter"),
        store: ResourceStore = Depends(get_store),
    ):
        with store_errors(f"Failed to fetch {resource.plural}"):
            records = store.collection(resource.model).list()
        return filter_records(records, resource.search_fields, search)

    @router.get("/{record_id}", response_model=ReadSchema)
    def get_record(record_id: str, store: ResourceStore = Depends(get_store)):
        with store_errors(f"Failed to fetch {resource.label}"):
            record = store.collection(resource.model).get(record_id)
        if record is None:
            logger.debug("%s %s not found", resource.label, record_id)
            raise NotFoundError(resource.not_found_message)
        return record

    @router.post("", response_model=ReadSchema, status_code=status.HTTP_201_CREATED)
    @router.post("/", response_model=ReadSchema, status_code=status.HTTP_201_CREATED, include_in_schema=False)
    def create_record(payload: CreateSchema, store: ResourceStore = Depends(get_store)):
        fields = resource.prepare_fields(payload.model_dump())
        with store_errors(f"Failed to create {resource.label}"):
            record = store.collection(resource.model).create(fields)
        logger.info("Created %s %s", resource.label, record.id)
        return record

    @router.put("/{record_id}", response_model=ReadSchema)
    def update_record(record_id: str, payload: UpdateSchema, store: ResourceStore = Depends(get_store)):
        # Only what the caller sent; explicit nulls included
        fields = resource.prepare_fields(payload.model_dump(exclude_unset=True))
        with store_errors(f"Failed to update {resource.label}"):
            record = store.collection(resource.model).update(record_id, fields)
        if record is None:
            logger.debug("%s %s not found for update", resource.label, record_id)
            raise NotFoundError(resource.not_found_message)
        logger.info("Updated %s %s (%s)", resource.label, record_id, ", ".join(sorted(fields)) or "no fields")
        return record

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_record(record_id: str, store: ResourceStore = Depends(get_store)):
        with store_errors(f"Failed to delete {resource.label}"):
            removed = store.collection(resource.model).delete(record_id)
        if not removed:
            logger.debug("%s %s not found for delete", resource.label, record_id)
            raise NotFoundError(resource.not_found_message)
        logger.info("Deleted %s %s", resource.label, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

from datetime import datetime
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar
from beanie import Document
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=Document)
CreateSchemaT = TypeVar("CreateSchemaT", bound=BaseModel)
UpdateSchemaT = TypeVar("UpdateSchemaT", bound=BaseModel)


class BaseCRUD(Generic[ModelT, CreateSchemaT, UpdateSchemaT]):
    """Device scoped persistence helpers.

    Every query goes through `_scoped`, so a record can only be read or
    written under the device that owns it. `id_field` names the per-device
    identifier (folder_id, file_id, ...).
    """

    id_field: str = "id"

    def __init__(self, model: Type[ModelT]):
        self.model = model

    def _scoped(self, device_id: str, filter_: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        query = dict(filter_ or {})
        query["device_id"] = device_id
        return query

    async def get(self, device_id: str, id: str) -> Optional[ModelT]:
        return await self.model.find_one(self._scoped(device_id, {self.id_field: id}))

    async def list(
        self,
        device_id: str,
        filter_: Optional[Dict[str, Any]] = None,
        limit: int = 0,
        skip: int = 0,
    ) -> List[ModelT]:
        cursor = self.model.find(self._scoped(device_id, filter_))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list()

    async def list_by_ids(self, device_id: str, ids: Iterable[str]) -> List[ModelT]:
        return await self.list(device_id, {self.id_field: {"$in": list(ids)}})

    async def create(self, obj_in: CreateSchemaT) -> ModelT:
        db_obj = self.model(**obj_in.model_dump())
        await db_obj.insert()
        return db_obj

    async def update(
        self,
        db_obj: ModelT,
        obj_in: UpdateSchemaT | Dict[str, Any],
    ) -> ModelT:
        # Schemas apply only the fields the caller set; dicts are applied
        # as given so that None can be written explicitly
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = dict(obj_in)

        if "updated_at" in self.model.model_fields:
            update_data["updated_at"] = datetime.utcnow()

        await db_obj.set(update_data)
        return db_obj

    async def update_many(self, device_id: str, filter_: Dict[str, Any], values: Dict[str, Any]) -> None:
        await self.model.find(self._scoped(device_id, filter_)).update({"$set": values})

    async def update_by_ids(self, device_id: str, ids: Iterable[str], values: Dict[str, Any]) -> None:
        await self.update_many(device_id, {self.id_field: {"$in": list(ids)}}, values)

    async def delete(self, db_obj: ModelT) -> None:
        await db_obj.delete()

    async def delete_many(self, device_id: str, filter_: Dict[str, Any]) -> None:
        await self.model.find(self._scoped(device_id, filter_)).delete()

    async def delete_by_ids(self, device_id: str, ids: Iterable[str]) -> None:
        await self.delete_many(device_id, {self.id_field: {"$in": list(ids)}})

"""Base repository for database operations."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import DatabaseError, DuplicateEntryError

type FilterValue = str | int | float | bool | UUID | None


class BaseRepository[ModelT: SQLModel, UpdateSchemaT: BaseModel]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[ModelT]:
        """
        Get the records matching a list of IDs, keeping the order of ``record_ids``.

        Args:
            record_ids: Record UUIDs

        Returns:
            list[ModelT]: Records found; unknown IDs are skipped
        """
        if not record_ids:
            return []
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column.in_(list(record_ids)))
        result = await self.session.execute(statement)
        by_id = {getattr(record, self.id_field): record for record in result.scalars().all()}
        return [by_id[record_id] for record_id in record_ids if record_id in by_id]

    async def get_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> ModelT | None:
        """
        Get a record by a specific field value.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelT]:
        """
        Get all records.

        Returns:
            list[ModelT]: List of records
        """
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def update(
        self,
        record_id: UUID,
        schema: UpdateSchemaT,
        **extra: Any,
    ) -> ModelT | None:
        """
        Update a record with the fields explicitly set on ``schema``.

        Args:
            record_id: Record UUID
            schema: Update schema with fields to update
            **extra: Additional column values to set

        Returns:
            ModelT | None: Updated record if found, None otherwise
        """
        db_obj = await self.get_by_id(record_id)
        if not db_obj:
            return None

        obj_data = schema.model_dump(exclude_unset=True)
        obj_data.update(extra)
        for key, value in obj_data.items():
            setattr(db_obj, key, value)

        return await self._add_and_refresh(db_obj)

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors or driver failures
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail=f"Failed to save record: {e}") from e

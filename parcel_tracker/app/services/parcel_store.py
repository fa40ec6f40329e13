"""
Parcel store.

Data-access component for the ``parcel`` table. The store holds a
session factory, which is safe to share between tasks; every operation
opens its own short-lived session and issues exactly one SQL statement.
Mutating operations commit before returning.
"""

from typing import List, Union
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from parcel_tracker.app.core.exceptions import ParcelNotFoundError, StorageError
from parcel_tracker.app.core.logging_config import get_logger
from parcel_tracker.app.models.parcel import ParcelRecord
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import Parcel

logger = get_logger("store")

# OverflowError: integer parameter outside the driver's range (SQLite: 64 bit)
STORAGE_ERRORS = (SQLAlchemyError, OverflowError)


class ParcelStore:
    """
    CRUD access to parcels plus lookup by client.

    Delete, set_address and set_status succeed when no row matches;
    only get reports absence (``ParcelNotFoundError``).

    Concurrent calls on one instance are allowed; isolation between them
    is left to the database engine.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _storage_error(self, operation: str, exc: Exception, **context) -> StorageError:
        logger.error(
            "Parcel storage failure",
            extra={"operation": operation, "error": type(exc).__name__, **context},
        )
        return StorageError(operation, str(exc), details=context)

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a new parcel and return its engine-assigned number.

        ``parcel.number`` is ignored.

        Raises:
            StorageError: If the insert fails (constraint, connection, ...)
        """
        record = ParcelRecord(
            client=parcel.client,
            status=ParcelStatus(parcel.status),
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(record)
                    await session.flush()
                    number = record.number
        except STORAGE_ERRORS as exc:
            raise self._storage_error("add", exc, client=parcel.client) from exc

        logger.debug("Parcel added", extra={"number": number, "client": parcel.client})
        return number

    async def get(self, number: int) -> Parcel:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
            StorageError: If the query fails
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(ParcelRecord).where(ParcelRecord.number == number)
                )
                record = result.scalar_one_or_none()
        except STORAGE_ERRORS as exc:
            raise self._storage_error("get", exc, number=number) from exc

        if record is None:
            raise ParcelNotFoundError(number)

        return Parcel.model_validate(record)

    async def _execute_write(self, operation: str, number: int, statement) -> int:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(statement)
        except STORAGE_ERRORS as exc:
            raise self._storage_error(operation, exc, number=number) from exc
        return result.rowcount

    async def delete(self, number: int) -> None:
        """Remove a parcel. Deleting a missing number is not an error."""
        rowcount = await self._execute_write(
            "delete", number,
            delete(ParcelRecord).where(ParcelRecord.number == number),
        )
        logger.debug("Parcel deleted", extra={"number": number, "rowcount": rowcount})

    async def set_address(self, number: int, address: str) -> None:
        """Change only the delivery address. No-op for a missing number."""
        rowcount = await self._execute_write(
            "set_address", number,
            update(ParcelRecord).where(ParcelRecord.number == number).values(address=address),
        )
        logger.debug("Parcel address set", extra={"number": number, "rowcount": rowcount})

    async def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """
        Change only the status.

        Any status is accepted from any other; there is no transition
        check. No-op for a missing number.

        Raises:
            ValueError: If ``status`` is not a known ParcelStatus value
            StorageError: If the update fails
        """
        status = ParcelStatus(status)
        rowcount = await self._execute_write(
            "set_status", number,
            update(ParcelRecord).where(ParcelRecord.number == number).values(status=status),
        )
        logger.debug(
            "Parcel status set",
            extra={"number": number, "status": status.value, "rowcount": rowcount},
        )

    async def get_by_client(self, client: int) -> List[Parcel]:
        """
        All parcels of a client, in whatever order the engine returns them.

        Returns an empty list when the client has none.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(ParcelRecord).where(ParcelRecord.client == client)
                )
                records = result.scalars().all()
        except STORAGE_ERRORS as exc:
            raise self._storage_error("get_by_client", exc, client=client) from exc

        return [Parcel.model_validate(record) for record in records]

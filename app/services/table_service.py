"""Table data access"""

from typing import Any, List, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.models.reservation import Reservation, ReservationStatus
from app.models.table import Table
from app.services.reservation_service import to_id

logger = structlog.get_logger()


class TableService:
    """Table collaborator used by the seating pipelines"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def read(self, table_id: Any) -> Optional[Table]:
        key = to_id(table_id)
        if key is None:
            return None
        return await self.db.get(Table, key)

    async def list(self) -> List[Table]:
        result = await self.db.execute(select(Table).order_by(Table.table_name))
        return list(result.scalars().all())

    async def create(self, fields: Mapping[str, Any], reservation: Optional[Reservation] = None) -> Table:
        """Add a table, seating ``reservation`` at it in the same commit when given"""
        table = Table(
            table_name=fields["table_name"].strip(),
            capacity=fields["capacity"],
        )
        if reservation is not None:
            table.reservation_id = reservation.reservation_id
            reservation.status = ReservationStatus.SEATED.value
        self.db.add(table)
        await self.db.commit()
        await self.db.refresh(table)

        logger.info(
            "Table created",
            table_id=table.table_id,
            table_name=table.table_name,
            reservation_id=table.reservation_id,
        )
        return table

    async def seat(self, table: Table, reservation: Reservation) -> Table:
        """Occupy the table and mark the reservation seated in one commit"""
        table.reservation_id = reservation.reservation_id
        reservation.status = ReservationStatus.SEATED.value

        await self.db.commit()
        await self.db.refresh(table)

        logger.info(
            "Reservation seated",
            table_id=table.table_id,
            reservation_id=reservation.reservation_id,
        )
        return table

    async def free(self, table: Table) -> Table:
        """Release the table and finish the reservation seated at it"""
        reservation_id = table.reservation_id
        reservation = await self.db.get(Reservation, reservation_id)

        table.reservation_id = None
        if reservation is not None:
            reservation.status = ReservationStatus.FINISHED.value

        await self.db.commit()
        await self.db.refresh(table)

        logger.info("Table freed", table_id=table.table_id, reservation_id=reservation_id)
        return table

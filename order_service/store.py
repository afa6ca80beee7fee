"""
In-memory order store: dict of UUID -> Order behind an asyncio reader/writer lock.
get/list share the reader lock; create/update_status/delete take the writer lock
and do their whole lookup + mutation under that one acquisition.
Nothing survives a restart.
"""
import logging
import uuid
from uuid import UUID

import aiorwlock

from order_service.errors import NotFoundError, ValidationFailedError
from order_service.models import Order
from order_service.order_state import OrderStatus
from order_service.schemas import CreateOrderDto, OrderResponseDto, UpdateStatusDto

logger = logging.getLogger(__name__)


def _ensure_valid(dto: CreateOrderDto | UpdateStatusDto) -> None:
    field_errors = dto.field_errors()
    if field_errors:
        raise ValidationFailedError(field_errors)


class OrderStore:
    def __init__(self) -> None:
        self._orders: dict[UUID, Order] = {}
        self._lock = aiorwlock.RWLock()

    async def create_order(self, data: CreateOrderDto) -> OrderResponseDto:
        _ensure_valid(data)
        async with self._lock.writer_lock:
            order_id = uuid.uuid4()
            while order_id in self._orders:  # never overwrite on a v4 collision
                order_id = uuid.uuid4()
            order = Order(
                id=order_id,
                customer=data.customer,
                items=list(data.items),
                status=OrderStatus.PENDING,
            )
            self._orders[order.id] = order
            logger.info("Inserted order id=%s customer=%r items=%d", order.id, order.customer, len(order.items))
            return OrderResponseDto.from_order(order)

    async def get_order(self, order_id: UUID) -> OrderResponseDto:
        async with self._lock.reader_lock:
            order = self._orders.get(order_id)
            if order is None:
                raise NotFoundError()
            return OrderResponseDto.from_order(order)

    async def list_orders(self) -> list[OrderResponseDto]:
        """Snapshot of every stored order. Order of the result is unspecified."""
        async with self._lock.reader_lock:
            return [OrderResponseDto.from_order(o) for o in self._orders.values()]

    async def update_status(self, order_id: UUID, data: UpdateStatusDto) -> OrderResponseDto:
        # Validation runs before the lookup: a bad status on a missing id is still 400.
        _ensure_valid(data)
        new_status = data.to_status()
        async with self._lock.writer_lock:
            order = self._orders.get(order_id)
            if order is None:
                raise NotFoundError()
            order.status = new_status
            logger.info("Updated order id=%s status=%s", order_id, new_status.value)
            return OrderResponseDto.from_order(order)

    async def delete_order(self, order_id: UUID) -> None:
        async with self._lock.writer_lock:
            if self._orders.pop(order_id, None) is None:
                raise NotFoundError()
            logger.info("Deleted order id=%s", order_id)

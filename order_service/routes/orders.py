import re
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from order_service.errors import BadRequestError
from order_service.metrics import order_status_updates_total, orders_created_total, orders_deleted_total
from order_service.schemas import CreateOrderDto, OrderResponseDto, UpdateStatusDto
from order_service.store import OrderStore

router = APIRouter(prefix="/orders", tags=["orders"])

# 8-4-4-4-12 hex, either case
_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def get_store(request: Request) -> OrderStore:
    return request.app.state.store


def parse_order_id(id: str) -> UUID:
    """Path parameter {id}. Anything but a canonical UUID -> 400 "invalid id"."""
    if not _UUID_RE.fullmatch(id):
        raise BadRequestError("invalid id")
    return UUID(id)


@router.post("", response_model=OrderResponseDto)
async def create_order(body: CreateOrderDto, store: OrderStore = Depends(get_store)) -> OrderResponseDto:
    order = await store.create_order(body)
    orders_created_total.inc()
    return order


@router.get("", response_model=list[OrderResponseDto])
async def list_orders(store: OrderStore = Depends(get_store)) -> list[OrderResponseDto]:
    """All orders, in no particular order."""
    return await store.list_orders()


@router.get("/{id}", response_model=OrderResponseDto)
async def get_order(
    order_id: UUID = Depends(parse_order_id),
    store: OrderStore = Depends(get_store),
) -> OrderResponseDto:
    return await store.get_order(order_id)


@router.put("/{id}/status", response_model=OrderResponseDto)
async def update_status(
    body: UpdateStatusDto,
    order_id: UUID = Depends(parse_order_id),
    store: OrderStore = Depends(get_store),
) -> OrderResponseDto:
    order = await store.update_status(order_id, body)
    order_status_updates_total.labels(status=order.status.value).inc()
    return order


@router.delete("/{id}")
async def delete_order(
    order_id: UUID = Depends(parse_order_id),
    store: OrderStore = Depends(get_store),
) -> Response:
    await store.delete_order(order_id)
    orders_deleted_total.inc()
    return Response(status_code=200)

"""Order API views.

Exposes ``OrderService`` and ``ExportOrderService`` via HTTP using DRF
ViewSets.  Domain exceptions are caught and translated into
``{"error": ...}`` responses; the view never swallows generic exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Type

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import BaseModel as DTO
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exception_handler import domain_error_response
from modules.core.exceptions import DomainError
from modules.core.identifiers import parse_id
from modules.core.references import EntityKind, ReferenceValidator
from modules.core.validation import parse_body
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import (
    CreateExportOrderDTO,
    CreateOrderDTO,
    ExportOrderStatusPatchDTO,
    OrderStatusPatchDTO,
    UpdateExportOrderDTO,
    UpdateOrderDTO,
)
from modules.orders.filters import ExportOrderFilter, OrderFilter
from modules.orders.models import ExportOrder, Order
from modules.orders.repositories.django_repository import (
    ExportOrderDjangoRepository,
    OrderDjangoRepository,
)
from modules.orders.serializers import (
    ExportOrderSerializer,
    ExportOrderViewSerializer,
    OrderSerializer,
    OrderViewSerializer,
)
from modules.orders.services import (
    ExportOrderService,
    OrderAggregateService,
    OrderService,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.suppliers.repositories.django_repository import SupplierDjangoRepository


class OrderAggregateViewSet(ABC, GenericViewSet):
    """Routes shared by ``/api/orders`` and ``/api/export-orders``.

    - ``GET /`` and ``GET /{id}`` answer with the joined view serializer.
    - ``POST /`` (201), ``PUT /{id}`` and ``PATCH /{id}/status`` answer
      with the raw row serializer.

    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    view_serializer_class: ClassVar[Type[serializers.Serializer]]
    create_dto: ClassVar[Type[DTO]]
    update_dto: ClassVar[Type[DTO]]
    status_dto: ClassVar[Type[DTO]]

    filter_backends = [DjangoFilterBackend]
    # Malformed ids must reach the view to get a 400, not a routing 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = self.build_service()

    @abstractmethod
    def build_service(self) -> OrderAggregateService:
        """Wire the service with its repositories (composition root)."""

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """Filtering is handled by the ``filterset_class`` via ``filter_backends``."""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.view_serializer_class(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            order = self._service.get_order(pk)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(self.view_serializer_class(order).data)

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        try:
            dto = parse_body(self.create_dto, request.data)
            order = self._service.create_order(dto)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            self.get_serializer(order).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        try:
            parse_id(pk)
            dto = parse_body(self.update_dto, request.data)
            order = self._service.update_order(pk, dto)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(self.get_serializer(order).data)

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """Partial status update; omitted dimensions keep their value."""
        try:
            parse_id(pk)
            patch = parse_body(self.status_dto, request.data)
            change = self._service.update_status(pk, patch)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            {
                "message": change.message,
                "order": self.get_serializer(change.order).data,
            }
        )


class OrderViewSet(OrderAggregateViewSet):
    """ViewSet for purchase orders.

    Uses ``OrderService`` with injected repositories (DIP).
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    view_serializer_class = OrderViewSerializer
    filterset_class = OrderFilter
    create_dto = CreateOrderDTO
    update_dto = UpdateOrderDTO
    status_dto = OrderStatusPatchDTO

    def build_service(self) -> OrderService:
        return OrderService(
            repository=OrderDjangoRepository(),
            references=ReferenceValidator(
                {
                    EntityKind.SUPPLIER: SupplierDjangoRepository(),
                    EntityKind.PRODUCT: ProductDjangoRepository(),
                }
            ),
        )


class ExportOrderViewSet(OrderAggregateViewSet):
    """ViewSet for export (sales) orders.

    Uses ``ExportOrderService`` with injected repositories (DIP).
    """

    queryset = ExportOrder.objects.all()
    serializer_class = ExportOrderSerializer
    view_serializer_class = ExportOrderViewSerializer
    filterset_class = ExportOrderFilter
    create_dto = CreateExportOrderDTO
    update_dto = UpdateExportOrderDTO
    status_dto = ExportOrderStatusPatchDTO

    def build_service(self) -> ExportOrderService:
        return ExportOrderService(
            repository=ExportOrderDjangoRepository(),
            references=ReferenceValidator(
                {
                    EntityKind.CUSTOMER: CustomerDjangoRepository(),
                    EntityKind.PRODUCT: ProductDjangoRepository(),
                }
            ),
        )

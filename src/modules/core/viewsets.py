"""Shared ViewSet for master-data resources.

Exposes a ``MasterDataService`` via HTTP:

- ``GET    /``            list
- ``GET    /{id}``        retrieve
- ``POST   /``            create
- ``PUT    /{id}``        update
- ``PATCH  /{id}/status`` activate / deactivate

Domain exceptions are caught and translated into ``{"error": ...}``
responses; the view never swallows generic exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Type

from pydantic import BaseModel as DTO
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exception_handler import domain_error_response
from modules.core.exceptions import DomainError
from modules.core.identifiers import parse_id
from modules.core.services import MasterDataService
from modules.core.validation import parse_body


class MasterDataViewSet(ABC, GenericViewSet):
    """Base ViewSet; subclasses wire the service and the DTO classes.

    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    create_dto: ClassVar[Type[DTO]]
    update_dto: ClassVar[Type[DTO]]
    # Key of the row in update / status responses, e.g. "category".
    entity_key: ClassVar[str]

    # Malformed ids must reach the view to get a 400, not a routing 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = self.build_service()

    @abstractmethod
    def build_service(self) -> MasterDataService:
        """Wire the service with its repositories (composition root)."""

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        serializer = self.get_serializer(self._service.list_all(), many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            entity = self._service.get(pk)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(self.get_serializer(entity).data)

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        try:
            dto = parse_body(self.create_dto, request.data)
            entity = self._service.create(dto)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            self.get_serializer(entity).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        try:
            parse_id(pk)
            dto = parse_body(self.update_dto, request.data)
            entity = self._service.update(pk, dto)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            {
                "message": f"{self._service.label} updated successfully",
                self.entity_key: self.get_serializer(entity).data,
            }
        )

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request: Request, pk: str | None = None) -> Response:
        """Body: ``{"is_active": true|false}``."""
        data = request.data if isinstance(request.data, dict) else {}
        is_active = data.get("is_active")
        try:
            entity = self._service.set_active(pk, is_active)
        except DomainError as exc:
            return domain_error_response(exc)

        state = "active" if entity.is_active else "inactive"
        return Response(
            {
                "message": (
                    f"{self._service.label} status updated successfully to {state}"
                ),
                self.entity_key: self.get_serializer(entity).data,
            }
        )

"""DRF router accepting paths with or without a trailing slash."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter


class OptionalSlashRouter(DefaultRouter):
    """``/api/orders`` and ``/api/orders/`` resolve to the same view.

    Clients of the HTTP surface post to slash-less paths, and Django's
    ``APPEND_SLASH`` redirect cannot carry a POST/PUT/PATCH body.
    """

    include_root_view = False
    include_format_suffixes = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"

"""
Error taxonomy raised by the service layer.

Services raise these synchronously and never catch them; translating them
into HTTP responses is the job of ``register_exception_handlers`` in
``blog_api.exception_handlers``.
"""
import logging
from typing import Any

logger = logging.getLogger(__name__)


class BlogAPIError(Exception):
    """Base class for all errors raised by the blog services."""


class ResourceNotFoundError(BlogAPIError):
    """An identity lookup by key found nothing.  Maps to 404."""

    def __init__(self, resource_name: str, field_name: str, field_value: Any) -> None:
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        message = f"{resource_name} not found with {field_name}: {field_value}"
        logger.debug("ResourceNotFoundError:: %s", message)
        super().__init__(message)


class ConflictError(BlogAPIError):
    """
    A resource exists but violates an invariant of the request, e.g. a
    comment addressed through a post it does not belong to.
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        logger.debug("ConflictError:: %s", message)
        super().__init__(message)

"""
exceptions.py
-------------
Domain errors raised by the service layer.
Both propagate to the caller untouched; handlers turn them into replies.
"""


class ReqKeeperError(Exception):
    """Base class for all ReqKeeper domain errors."""


class RequirementAlreadyExistsException(ReqKeeperError):
    """Raised when a requirement is created with a title that is already stored."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Requirement already exists with the given title '{title}'")


class ResourceNotFoundException(ReqKeeperError):
    """
    Raised when a lookup finds nothing.

    Args:
        resource_name: Kind of resource, e.g. "Requirement".
        field_name: Field that was searched on, e.g. "uuid".
        field_value: The value that matched nothing.
    """

    def __init__(self, resource_name: str, field_name: str, field_value: str):
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(
            f"{resource_name} not found with the given input data {field_name} : '{field_value}'"
        )

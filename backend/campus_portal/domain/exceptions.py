"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RemoteOperationError(Exception):
    """Raised when a remote data service rejects a create/update/delete.

    Transport-agnostic — works for HTTP, in-process callbacks, etc.
    ``status_code`` is ``None`` when the failure did not come from HTTP and
    ``0`` when the request never produced a response.
    """

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ChatbotError(Exception):
    """Raised when a chat request cannot be answered (e.g. empty message)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

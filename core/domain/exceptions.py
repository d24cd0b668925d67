"""
Domain exceptions.

Domain exceptions represent business rule violations
and storage error conditions raised by entity collections.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class EntityValidationError(DomainException):
    """Raised when input for an entity is missing or malformed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class StoreException(DomainException):
    """Base exception for collection store errors."""

    pass


class RecordNotFoundError(StoreException):
    """Raised when a record id is not present in a collection."""

    def __init__(self, message: str = "Record not found", record_id: str = None):
        super().__init__(message, code="NOT_FOUND")
        self.record_id = record_id


class DuplicateIdError(StoreException):
    """Raised when a record is created with an id the collection has already used."""

    def __init__(self, record_id: str, collection: str = None):
        where = f" in {collection}" if collection else ""
        super().__init__(f"Record id already used{where}: {record_id}", code="DUPLICATE_ID")
        self.record_id = record_id


class DuplicateValueError(StoreException):
    """Raised when a unique field repeats a value already stored."""

    def __init__(self, field: str, collection: str = None):
        where = f" in {collection}" if collection else ""
        super().__init__(f"Duplicate value for unique field '{field}'{where}", code="DUPLICATE_VALUE")
        self.field = field


class InvalidCursorError(StoreException):
    """Raised when a cursor does not decode to a known position."""

    def __init__(self, message: str = "Invalid cursor"):
        super().__init__(message, code="INVALID_CURSOR")


class CorruptRecordError(StoreException):
    """Raised when a stored payload does not match the expected record shape."""

    def __init__(self, message: str = "Corrupt record", record_id: str = None):
        super().__init__(message, code="CORRUPT_RECORD")
        self.record_id = record_id

# app/utils/errors.py
"""
Domain exceptions raised by the service layer.
main.py turns every RentalError into a JSON response with its status_code;
anything else becomes a logged 500.
"""

from fastapi import status


class RentalError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailedError(RentalError):
    status_code = status.HTTP_400_BAD_REQUEST


class BookingConflictError(RentalError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Car is not available for the selected dates"):
        super().__init__(message)


class InvalidTransitionError(RentalError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, current: str, requested: str):
        super().__init__(f"Cannot change {field} from '{current}' to '{requested}'")
        self.field = field
        self.current = current
        self.requested = requested


class ForbiddenError(RentalError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class NotFoundError(RentalError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class UnauthenticatedError(RentalError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)

# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# The kinds of things that can go wrong in the reminder service (a reminder that doesn't exist,
# a bad schedule, an alert the phone refused) each get their own clearly named error.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at PlantCareException. Each class fixes its HTTP status and error
# code; keyword context is collected into `details` for the JSON error envelope in app.main.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# app.main exception handlers, database session manager, care_management services and repositories

from typing import Any, Dict, Optional

from fastapi import status


def _details(details: Optional[Dict[str, Any]] = None, **context: Any) -> Dict[str, Any]:
    """Merge keyword context into a details dict, skipping unset values."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class PlantCareException(Exception):
    """
    Base exception class for the reminder service.

    Subclasses set `status_code` and `error_code`; app.main renders any
    PlantCareException as the standard error envelope.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code,
            }
        }


# =============================================================================
# CLIENT ERRORS
# =============================================================================

class ValidationError(PlantCareException):
    """Input that fails reminder field validation."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details=_details(
                details,
                field=field,
                value=None if value is None else str(value),
                constraint=constraint,
            ),
        )


class NotFoundError(PlantCareException):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details=_details(details, resource_type=resource_type, resource_id=resource_id),
        )


class BusinessRuleViolationError(PlantCareException):
    """A well-formed request the domain refuses."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "BUSINESS_RULE_VIOLATION"

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_details(details, rule=rule))


# =============================================================================
# INFRASTRUCTURE ERRORS
# =============================================================================

class ExternalServiceError(PlantCareException):
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_details(details, service=service))


class DatabaseError(PlantCareException):
    """Engine or session level failure (connection, unexpected SQL error)."""

    error_code = "DATABASE_ERROR"

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_details(details, operation=operation))


class RepositoryError(PlantCareException):
    """A repository query or write failed."""

    error_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_details(details, operation=operation, entity=entity))


class TransactionError(PlantCareException):
    """Commit or rollback of a request session failed."""

    error_code = "TRANSACTION_ERROR"

    def __init__(self, message: str = "Database transaction failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


# =============================================================================
# CARE REMINDER EXCEPTIONS
# =============================================================================

class ReminderNotFoundError(NotFoundError):
    def __init__(self, reminder_id: str, message: Optional[str] = None):
        super().__init__(
            message or f"Reminder not found: {reminder_id}",
            resource_type="reminder",
            resource_id=reminder_id,
            details={"reminder_id": reminder_id},
        )


class CareScheduleError(BusinessRuleViolationError):
    """
    A reminder's schedule cannot be used for the requested action,
    e.g. snoozing a disabled reminder.
    """

    def __init__(
        self,
        message: str = "Care schedule error",
        plant_id: Optional[str] = None,
        reminder_id: Optional[str] = None,
        conflict: Optional[str] = None,
    ):
        super().__init__(
            message,
            rule="care_schedule",
            details=_details(plant_id=plant_id, reminder_id=reminder_id, conflict=conflict),
        )


class NotificationRegistrationError(ExternalServiceError):
    """
    A device alert could not be registered or cancelled.
    The reminder's schedule is unaffected; callers decide whether to retry.
    """

    def __init__(
        self,
        message: str = "Alert registration failed",
        reminder_id: Optional[str] = None,
        trigger_shape: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service="notification_registrar",
            details=_details(details, reminder_id=reminder_id, trigger_shape=trigger_shape),
        )

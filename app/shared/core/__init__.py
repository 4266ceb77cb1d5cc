"""
Core utilities package for the Plant Care reminder service.
Provides the exception hierarchy and the in-process event bus.
"""

from .exceptions import (
    PlantCareException,
    ValidationError,
    NotFoundError,
    BusinessRuleViolationError,
    ExternalServiceError,
    DatabaseError,
    RepositoryError,
    TransactionError,
    ReminderNotFoundError,
    CareScheduleError,
    NotificationRegistrationError,
)

from .event_bus import (
    EventBus,
    DomainEvent,
    EventHandler,
    BaseEventHandler,
    current_event_bus,
    get_event_bus,
    shutdown_event_bus,
)

__all__ = [
    # Exceptions
    "PlantCareException",
    "ValidationError",
    "NotFoundError",
    "BusinessRuleViolationError",
    "ExternalServiceError",
    "DatabaseError",
    "RepositoryError",
    "TransactionError",
    "ReminderNotFoundError",
    "CareScheduleError",
    "NotificationRegistrationError",

    # Event Bus
    "EventBus",
    "DomainEvent",
    "EventHandler",
    "BaseEventHandler",
    "current_event_bus",
    "get_event_bus",
    "shutdown_event_bus",
]

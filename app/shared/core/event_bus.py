"""
In-process event bus for the reminder service.

Lifecycle operations publish domain events onto an asyncio queue; a small
pool of workers hands each event to the handlers subscribed to its type,
retrying failed handlers with exponential backoff. Publishing never waits
for handlers, so an observer failure cannot affect a reminder write.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    """Something that happened to an aggregate. Subclasses set event_type."""
    aggregate_id: str = ""
    event_type: str = ""
    aggregate_type: str = ""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @property
    def correlation_id(self) -> Optional[str]:
        return self.metadata.get("correlation_id")


class EventHandler(ABC):
    """Handles one event type. `handle` returns False to request a retry."""

    @property
    @abstractmethod
    def event_type(self) -> str:
        ...

    @abstractmethod
    async def handle(self, event: DomainEvent) -> bool:
        ...

    async def on_error(self, event: DomainEvent, error: Exception) -> None:
        logger.error(f"Error handling event {event.event_id}: {error}", exc_info=error)


class BaseEventHandler(EventHandler):
    """Handler with a name and success/error counters."""

    def __init__(self, name: str):
        self.name = name
        self.processed_count = 0
        self.error_count = 0

    async def on_error(self, event: DomainEvent, error: Exception) -> None:
        self.error_count += 1
        logger.error(
            f"Handler {self.name} gave up on {event.event_type}: {error}",
            extra={
                "handler_name": self.name,
                "event_id": event.event_id,
                "event_type": event.event_type,
                "error_count": self.error_count,
            },
        )


@dataclass
class _Subscription:
    handler: EventHandler
    retry_count: int = 3
    timeout: Optional[float] = None


class EventBus:
    """Queue-backed publish/subscribe bus with a fixed worker pool."""

    def __init__(self, worker_count: int = 2, retry_delay: float = 1.0):
        self._subscriptions: Dict[str, List[_Subscription]] = {}
        self._queue: "asyncio.Queue[Tuple[DomainEvent, Optional[str]]]" = asyncio.Queue()
        self._workers: List[asyncio.Task] = []
        self._worker_count = worker_count
        self._retry_delay = retry_delay
        self._stats = {"published": 0, "processed": 0, "failed": 0, "retries": 0}

    @property
    def running(self) -> bool:
        return bool(self._workers)

    async def start(self) -> None:
        if self.running:
            return
        self._workers = [
            asyncio.create_task(self._worker(), name=f"event-worker-{i}")
            for i in range(self._worker_count)
        ]
        logger.info(f"Event bus started with {self._worker_count} workers")

    async def stop(self) -> None:
        if not self.running:
            return
        for worker in self._workers:
            worker.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers = []
        logger.info("Event bus stopped")

    def subscribe(
        self,
        handler: EventHandler,
        event_type: Optional[str] = None,
        retry_count: int = 3,
        timeout: Optional[float] = None,
    ) -> None:
        event_type = event_type or handler.event_type
        self._subscriptions.setdefault(event_type, []).append(
            _Subscription(handler=handler, retry_count=retry_count, timeout=timeout)
        )
        logger.info(f"Handler {handler.__class__.__name__} subscribed to {event_type}")

    async def publish(self, event: DomainEvent, correlation_id: Optional[str] = None) -> None:
        await self._queue.put((event, correlation_id))
        self._stats["published"] += 1
        logger.debug(f"Event published: {event.event_type} - {event.event_id}")

    async def drain(self) -> None:
        """Wait until every queued event has been handled."""
        await self._queue.join()

    def get_stats(self) -> Dict[str, Any]:
        return {
            **self._stats,
            "running": self.running,
            "queue_size": self._queue.qsize(),
            "event_types": sorted(self._subscriptions),
        }

    # =========================================================================
    # PROCESSING
    # =========================================================================

    async def _worker(self) -> None:
        while True:
            event, correlation_id = await self._queue.get()
            try:
                if correlation_id:
                    event.metadata["correlation_id"] = correlation_id
                for subscription in self._subscriptions.get(event.event_type, []):
                    await self._dispatch(event, subscription)
            except Exception as e:
                logger.error(f"Event worker failed on {event.event_id}: {e}", exc_info=True)
            finally:
                self._queue.task_done()

    async def _dispatch(self, event: DomainEvent, subscription: _Subscription) -> None:
        handler = subscription.handler
        for attempt in range(subscription.retry_count + 1):
            try:
                handled = await asyncio.wait_for(handler.handle(event), timeout=subscription.timeout)
                if handled:
                    self._stats["processed"] += 1
                    return
                error: Exception = RuntimeError("Handler returned False")
            except asyncio.TimeoutError:
                error = TimeoutError(f"{handler.__class__.__name__} timed out")
            except Exception as e:
                error = e

            logger.warning(f"Handler {handler.__class__.__name__} failed for {event.event_id}: {error}")
            if attempt < subscription.retry_count:
                self._stats["retries"] += 1
                await asyncio.sleep(self._retry_delay * (2 ** attempt))

        self._stats["failed"] += 1
        await handler.on_error(event, error)


# =============================================================================
# APPLICATION-WIDE INSTANCE
# =============================================================================

_event_bus: Optional[EventBus] = None


async def get_event_bus() -> EventBus:
    """Global event bus, started on first use."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
        await _event_bus.start()
    return _event_bus


def current_event_bus() -> Optional[EventBus]:
    """The global bus if one has been started, without creating it."""
    return _event_bus


async def shutdown_event_bus() -> None:
    global _event_bus
    if _event_bus is not None:
        await _event_bus.stop()
        _event_bus = None
        logger.info("Global event bus shutdown")

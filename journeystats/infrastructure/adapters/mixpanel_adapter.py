"""
Mixpanel Analytics Adapter

Architectural Intent:
- Implements TrackingPort for the Mixpanel ingestion API
- Explicitly constructed and injected; enable()/disable() control its lifecycle
- Uses stdlib urllib for the HTTP layer (no external dependencies)

Design Decisions:
- track() never performs I/O; events are queued and sent by flush()
- track() is a no-op while disabled, so nothing is queued before consent
- flush() sends the queue in batches; unsent batches stay queued for the next attempt
"""

import asyncio
import json
import logging
import time
import urllib.error
import urllib.request
import uuid
from typing import Any, Optional

from journeystats.domain.value_objects.analytics_record import AnalyticsRecord

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.mixpanel.com/track"

# Upper bound of events per /track request
MAX_BATCH_SIZE = 50


class MixpanelAdapter:
    """Mixpanel analytics adapter."""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, timeout: float = 5.0) -> None:
        """Initialize Mixpanel adapter.

        Args:
            endpoint: Mixpanel ingestion endpoint
            timeout: HTTP timeout in seconds for flush()
        """
        self._endpoint = endpoint
        self._timeout = timeout
        self._token: Optional[str] = None
        self._user_id: Optional[str] = None
        self._stage: Optional[str] = None
        self._queue: list[dict[str, Any]] = []

    @property
    def is_enabled(self) -> bool:
        return self._token is not None

    @property
    def pending(self) -> list[dict[str, Any]]:
        return list(self._queue)

    def enable(self, token: str, user_id: str, stage: str) -> None:
        if not token:
            raise ValueError("Mixpanel token cannot be empty")
        self._token = token
        self._user_id = user_id
        self._stage = stage
        logger.info("Mixpanel tracking enabled [stage=%s]", stage)

    def disable(self) -> None:
        """Stop tracking and drop everything not yet sent."""
        self._token = None
        self._user_id = None
        self._stage = None
        dropped = len(self._queue)
        self._queue.clear()
        logger.info("Mixpanel tracking disabled, dropped %d queued events", dropped)

    def track(self, event_name: str, record: AnalyticsRecord) -> None:
        if not self.is_enabled:
            logger.debug("Mixpanel disabled, not tracking %s", event_name)
            return

        properties = {
            "token": self._token,
            "distinct_id": self._user_id,
            "stage": self._stage,
            "time": int(time.time() * 1000),
            "$insert_id": uuid.uuid4().hex,
        }
        properties.update(record.to_dict())

        self._queue.append({"event": event_name, "properties": properties})
        logger.debug("Queued %s (%d pending)", event_name, len(self._queue))

    def _post(self, batch: list[dict[str, Any]]) -> None:
        request = urllib.request.Request(
            self._endpoint,
            data=json.dumps(batch).encode("utf-8"),
            headers={"Content-Type": "application/json", "Accept": "text/plain"},
            method="POST",
        )
        with urllib.request.urlopen(request, timeout=self._timeout) as response:
            body = response.read().decode("utf-8").strip()
        if body != "1":
            raise ConnectionError(f"Mixpanel rejected batch: {body!r}")

    async def flush(self) -> int:
        """Send queued events in batches of at most MAX_BATCH_SIZE.

        Each batch leaves the queue once accepted. A failed batch stops the
        flush and stays queued, together with everything after it.

        Returns:
            Number of events sent
        """
        loop = asyncio.get_running_loop()
        sent = 0
        while self._queue:
            batch = self._queue[:MAX_BATCH_SIZE]
            try:
                await loop.run_in_executor(None, self._post, batch)
            except (urllib.error.URLError, ConnectionError, TimeoutError) as e:
                logger.warning(
                    "Mixpanel flush failed, keeping %d events: %s", len(self._queue), e
                )
                break
            del self._queue[: len(batch)]
            sent += len(batch)

        if sent:
            logger.info("Flushed %d events to Mixpanel", sent)
        return sent

import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)


class KeepAliveService:
    """Periodically pings the service's own health endpoint so idle hosts don't suspend it."""

    def __init__(self, base_url: str, interval_seconds: float = 600):
        self.base_url = base_url
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None

    async def ping(self) -> bool:
        """Calls the health endpoint once. Failures are logged, never raised."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(self.base_url)
                response.raise_for_status()
                message = response.json().get("message")
            logger.info(f"Server pinged successfully: {message}")
            return True
        except Exception as e:
            logger.error(f"Error pinging server: {e}")
            return False

    async def run(self):
        """Pings the server every interval until cancelled."""
        logger.info(f"🔄 Starting keep-alive ping (every {self.interval_seconds}s).")
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.ping()

    def start(self):
        """Starts the background ping task."""
        if self._task is None:
            self._task = asyncio.create_task(self.run())
            logger.info("Keep-alive task created.")

    async def stop(self):
        """Cancels the background ping task and waits for it to finish."""
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        logger.info("🛑 Stopped keep-alive ping.")

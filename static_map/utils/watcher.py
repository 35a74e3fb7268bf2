"""
Cancellable polling of a readiness predicate.

The watcher checks a predicate on a fixed interval from a single asyncio
task. It completes exactly once: when the predicate first becomes true,
when the optional timeout expires, or when it is cancelled. The polling
task is always finished when the watcher completes.
"""
import asyncio
from typing import Callable, Optional
from static_map.core.errors import RouteResolutionTimeout
from static_map.core.logging_config import logger


class ReadinessWatcher:
    """Poll ``predicate`` every ``interval`` seconds until it is true."""
    
    def __init__(
        self,
        predicate: Callable[[], bool],
        interval: float,
        timeout: Optional[float] = None,
        on_ready: Optional[Callable[[], None]] = None,
        name: str = "watcher",
    ):
        self.predicate = predicate
        self.interval = interval
        self.timeout = timeout
        self.on_ready = on_ready
        self.name = name
        self._task: Optional[asyncio.Task] = None
    
    def start(self) -> "ReadinessWatcher":
        """Start polling on the running event loop. Starting twice is a no-op."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self
    
    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = None if self.timeout is None else loop.time() + self.timeout
        
        while not self.predicate():
            if deadline is not None and loop.time() >= deadline:
                logger.warning(f"{self.name}: not ready after {self.timeout}s")
                raise RouteResolutionTimeout(
                    f"{self.name} did not become ready within {self.timeout}s"
                )
            await asyncio.sleep(self.interval)
        
        logger.debug(f"{self.name}: ready")
        if self.on_ready is not None:
            self.on_ready()
    
    async def wait(self) -> None:
        """
        Wait until the predicate is true.
        
        Raises:
            RouteResolutionTimeout: If the timeout expired first
            asyncio.CancelledError: If the watcher was cancelled
        """
        self.start()
        # shield so a cancelled waiter does not cancel the shared poll
        await asyncio.shield(self._task)
    
    def done(self) -> bool:
        return self._task is not None and self._task.done()
    
    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            logger.debug(f"{self.name}: cancelled")
            self._task.cancel()

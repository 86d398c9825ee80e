"""Sequential multi-target scanning with per-target failure isolation."""

import logging
import time
from collections.abc import Callable, Sequence

from .executor import ScanExecutor
from .models import BatchResult, ScanConfig
from .session import BrowserSession

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """Scan targets one after another on a single shared browser."""

    def __init__(self, executor: ScanExecutor, session_factory: Callable[[], BrowserSession]):
        self.executor = executor
        self._session_factory = session_factory

    async def run(
        self,
        configs: Sequence[ScanConfig],
        progress: Callable[[str], None] | None = None,
    ) -> list[BatchResult]:
        """Return one BatchResult per config, in input order.

        A failing target is recorded and the loop moves on; the browser is
        released once after the loop whatever happens inside it.
        """
        results: list[BatchResult] = []
        async with self._session_factory() as session:
            for config in configs:
                label = config.target.label
                started = time.perf_counter()
                if progress:
                    progress(f"● [{label}] started")
                try:
                    outcome = await self.executor.execute(session, config)
                except Exception as exc:
                    message = str(exc) or exc.__class__.__name__
                    logger.error("Error scanning URL %s: %s", label, message)
                    if progress:
                        elapsed = time.perf_counter() - started
                        progress(f"! [{label}] failed after {elapsed:.1f}s: {message}")
                    results.append(BatchResult.failed(label, message))
                    continue
                if progress:
                    elapsed = time.perf_counter() - started
                    progress(
                        f"✓ [{label}] completed: "
                        f"{outcome.summary.violations_count} violations ({elapsed:.1f}s)"
                    )
                results.append(BatchResult.succeeded(label, outcome))
        return results

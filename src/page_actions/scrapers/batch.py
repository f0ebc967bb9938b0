"""Batch extraction with a concurrency ceiling and per-URL failure isolation."""

import time
from collections.abc import Awaitable, Callable

import anyio
import structlog

from page_actions.exceptions import (
    BatchOrchestrationError,
    FetchError,
    PageActionsError,
    ValidationError,
)
from page_actions.models.page import (
    MAX_BATCH_URLS,
    MAX_CONCURRENCY,
    MIN_CONCURRENCY,
    BatchItemFailure,
    BatchItemResult,
    BatchItemSuccess,
    BatchResult,
    ExtractionRecord,
)

logger = structlog.get_logger(__name__)

ExtractFn = Callable[[str], Awaitable[ExtractionRecord]]


def clamp_concurrency(value: int) -> int:
    """Clamp a requested concurrency into the supported range."""
    return max(MIN_CONCURRENCY, min(MAX_CONCURRENCY, value))


class BatchExtractor:
    """
    Runs single-page extraction over a list of URLs.

    At most ``concurrency`` extractions are in flight at once. Every URL is
    attempted exactly once, a failure is recorded on its own item, and the
    results come back in input order whatever the completion order.
    """

    def __init__(
        self,
        extract: ExtractFn,
        default_concurrency: int = 3,
        max_urls: int = MAX_BATCH_URLS,
    ) -> None:
        """
        Initialize the batch extractor.

        Args:
            extract: Single-page extraction coroutine, e.g. PageExtractor.extract
            default_concurrency: Ceiling used when a call does not give one
            max_urls: Largest accepted batch
        """
        self._extract = extract
        self._default_concurrency = clamp_concurrency(default_concurrency)
        self._max_urls = max_urls

    async def _extract_one(self, url: str) -> BatchItemResult:
        try:
            record = await self._extract(url)
        except FetchError as e:
            logger.info("batch_item_failed", url=url, error=e.message)
            return BatchItemFailure.from_error(url, e.message)
        except PageActionsError as e:
            logger.info("batch_item_failed", url=url, error=str(e))
            return BatchItemFailure.from_error(url, str(e))
        except Exception as e:
            logger.exception("batch_item_error", url=url, error=str(e))
            return BatchItemFailure.from_error(url, str(e) or e.__class__.__name__)
        return BatchItemSuccess(data=record)

    async def extract_batch(
        self,
        urls: list[str],
        concurrency: int | None = None,
    ) -> BatchResult:
        """
        Extract every URL in *urls*.

        Args:
            urls: 1 to ``max_urls`` URLs
            concurrency: Maximum in-flight extractions (clamped to 1-5)

        Returns:
            BatchResult with one item per URL, in input order

        Raises:
            ValidationError: If the batch is empty or too large
            BatchOrchestrationError: If scheduling itself fails
        """
        if not urls:
            raise ValidationError("At least one URL is required")
        if len(urls) > self._max_urls:
            raise ValidationError(f"Maximum {self._max_urls} URLs allowed per batch request")

        limit = clamp_concurrency(concurrency if concurrency is not None else self._default_concurrency)
        start_time = time.monotonic()

        # Index-addressed so completion order cannot reorder results
        results: list[BatchItemResult | None] = [None] * len(urls)
        semaphore = anyio.Semaphore(limit)

        async def run(index: int, url: str) -> None:
            async with semaphore:
                results[index] = await self._extract_one(url)

        try:
            async with anyio.create_task_group() as tg:
                for index, url in enumerate(urls):
                    tg.start_soon(run, index, url)
        except Exception as e:
            logger.exception("batch_orchestration_error", error=str(e))
            raise BatchOrchestrationError(str(e) or e.__class__.__name__) from e

        missing = [urls[i] for i, item in enumerate(results) if item is None]
        if missing:
            raise BatchOrchestrationError(f"Batch finished without results for: {', '.join(missing)}")

        batch = BatchResult(results=results)
        logger.info(
            "batch_completed",
            total_urls=len(urls),
            concurrency=limit,
            successful=batch.successful,
            failed=batch.failed,
            elapsed_ms=(time.monotonic() - start_time) * 1000,
        )
        return batch

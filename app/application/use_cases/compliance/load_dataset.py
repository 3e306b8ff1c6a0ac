"""Load compliance dataset use case: one batched, all-or-nothing read per view."""

from __future__ import annotations

import asyncio
import logging

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.application.dtos.compliance import ComplianceDataset
from app.application.interfaces.repositories import (
    IDocumentRecordRepository,
    IDocumentTypeRepository,
    ITrackedEntityRepository,
)
from app.domain.enums import EntityCategory
from app.domain.exceptions import DataUnavailableException

logger = logging.getLogger(__name__)

_MAX_RETRY_WAIT_SECONDS = 10.0


class ComplianceDatasetLoader:
    """Fetches entities, document types and records for one category.

    The three reads run under a single timeout and the whole batch is
    retried on failure; callers either get a complete dataset or a
    DataUnavailableException.
    """

    def __init__(
        self,
        document_type_repo: IDocumentTypeRepository,
        entity_repo: ITrackedEntityRepository,
        document_record_repo: IDocumentRecordRepository,
        timeout_seconds: float = 30.0,
        max_attempts: int = 3,
        retry_wait_seconds: float = 0.5,
    ) -> None:
        self._document_type_repo = document_type_repo
        self._entity_repo = entity_repo
        self._document_record_repo = document_record_repo
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max_attempts
        self._retry_wait_seconds = retry_wait_seconds

    async def load(self, category: EntityCategory) -> ComplianceDataset:
        """Return the prefetched dataset for category.

        Args:
            category: Entity category (company or driver).

        Returns:
            Dataset with entities, document types, records and ID-keyed maps.

        Raises:
            DataUnavailableException: If every attempt failed or timed out.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(
                    multiplier=self._retry_wait_seconds, max=_MAX_RETRY_WAIT_SECONDS
                ),
                retry=retry_if_exception_type((DataUnavailableException, TimeoutError)),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    dataset = await self._fetch(category)
        except TimeoutError as exc:
            logger.error(
                "Compliance data fetch for %s timed out after %d attempt(s)",
                category.value,
                self._max_attempts,
            )
            raise DataUnavailableException(
                f"{category.value}_compliance_data",
                f"timed out after {self._timeout_seconds}s",
            ) from exc
        except DataUnavailableException as exc:
            logger.error(
                "Compliance data fetch for %s failed after %d attempt(s): %s",
                category.value,
                self._max_attempts,
                exc.details.get("reason"),
            )
            raise

        logger.debug(
            "Loaded %s compliance data: %d entities, %d document types, %d records",
            category.value,
            len(dataset.entities),
            len(dataset.document_types),
            len(dataset.records),
        )
        return dataset

    async def _fetch(self, category: EntityCategory) -> ComplianceDataset:
        # Sequential: repositories may share one database session.
        async with asyncio.timeout(self._timeout_seconds):
            catalog = await self._document_type_repo.list_all_document_types()
            entities = await self._entity_repo.list_entities(category)
            records = await self._document_record_repo.list_document_records(category)
        return ComplianceDataset.build(
            category=category,
            entities=entities,
            catalog=catalog,
            records=records,
        )

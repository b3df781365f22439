"""Overdue Invoice Marker Background Worker

Periodically moves pending and sent invoices past their due date to overdue.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.database import create_engine
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.invoices import MarkOverdueInvoices

logger = logging.getLogger(__name__)


class OverdueInvoiceWorker:
    """
    Background worker flagging overdue invoices

    Features:
    - Processes invoices in batches until none are left
    - Safe to re-run: already flagged invoices are skipped
    - Can run once or continuously

    Usage:
        # Run once
        worker = OverdueInvoiceWorker()
        await worker.run_once()

        # Run continuously
        worker = OverdueInvoiceWorker()
        await worker.run_forever(interval_seconds=3600)
    """

    def __init__(self, db_uri: Optional[str] = None, batch_size: int = 500):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            batch_size: Invoices updated per transaction
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.batch_size = batch_size

        self.engine = create_engine(self.db_uri)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info(f"OverdueInvoiceWorker initialized with batch_size={self.batch_size}")

    async def run_once(self, as_of: Optional[date] = None) -> int:
        """
        Flag every invoice overdue as of the given date

        Args:
            as_of: Reference date (default: today)

        Returns:
            Number of invoices marked overdue
        """
        if not ApplicationConfig.OVERDUE_CHECK_ENABLED:
            logger.info("Overdue check is disabled, skipping")
            return 0

        as_of = as_of or date.today()
        total = 0

        while True:
            async with self.async_session_factory() as session:
                use_case = MarkOverdueInvoices(
                    uow=SqlAlchemyUnitOfWork(session),
                    invoice_repo=SqlAlchemyInvoiceRepository(session),
                    batch_size=self.batch_size,
                )
                result = await use_case.execute(as_of)

            if result.is_err():
                logger.error(f"Overdue marking failed: {result.error.message} ({result.error.reason})")
                break

            total += result.value.marked
            if result.value.checked < self.batch_size:
                break

        return total

    async def run_forever(self, interval_seconds: Optional[int] = None):
        """
        Run the check continuously at the specified interval

        Args:
            interval_seconds: Seconds between runs (default: from config)
        """
        interval_seconds = interval_seconds or ApplicationConfig.OVERDUE_CHECK_INTERVAL_SECONDS
        logger.info(f"Starting continuous overdue check with {interval_seconds}s interval")

        while True:
            try:
                count = await self.run_once()
                logger.info(f"Overdue check complete. Marked {count} invoice(s)")
            except Exception as e:
                logger.error(f"Overdue check failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("OverdueInvoiceWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.overdue_marker [--once]
    """
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    worker = OverdueInvoiceWorker()

    if "--once" in sys.argv:
        count = await worker.run_once()
        print(f"Overdue check complete. Marked {count} invoice(s).")
        await worker.shutdown()
    else:
        try:
            await worker.run_forever()
        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        finally:
            await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())

"""Scan a directory tree and extract every deployment descriptor in it."""

import asyncio
import time
from pathlib import Path
from typing import Optional

from webxml_params.config.models import ScanConfig
from webxml_params.exceptions import WebXmlParamsError
from webxml_params.extraction.extractor import ContextParamExtractor
from webxml_params.models.params import ExtractionResult
from webxml_params.models.scan import DescriptorFailure, ScanReport
from webxml_params.utils.file_utils import find_files
from webxml_params.utils.logging import get_logger

logger = get_logger("orchestration.scanner")


class DescriptorScanner:
    """Finds deployment descriptors below a directory and extracts each one.

    Files are read concurrently, bounded by ``ScanConfig.max_concurrency``.
    A descriptor that cannot be read or parsed is recorded as a failure and
    does not stop the scan.
    """

    def __init__(
        self,
        extractor: Optional[ContextParamExtractor] = None,
        scan_config: Optional[ScanConfig] = None,
    ):
        """Initialize the scanner.

        Args:
            extractor: Extractor used for each descriptor.
            scan_config: Descriptor glob, exclusions and concurrency.
        """
        self._extractor = extractor or ContextParamExtractor()
        self._config = scan_config or ScanConfig()

    def find_descriptors(self, root: Path) -> list[Path]:
        """List descriptor files below root, sorted by path."""
        return find_files(
            root,
            self._config.include_pattern,
            exclude_patterns=self._config.exclude_patterns,
        )

    async def scan(self, root: Path) -> ScanReport:
        """Extract context parameters from every descriptor below root.

        Args:
            root: Directory to search.

        Returns:
            ScanReport with one result or failure per descriptor, in path order.
        """
        started = time.monotonic()
        descriptors = self.find_descriptors(root)
        logger.info(f"Found {len(descriptors)} descriptors under {root}")

        semaphore = asyncio.Semaphore(self._config.max_concurrency)

        async def process(path: Path) -> ExtractionResult | DescriptorFailure:
            async with semaphore:
                try:
                    return await self._extractor.extract_file_async(path)
                except WebXmlParamsError as e:
                    logger.error(f"Failed to extract {path}: {e}")
                    return DescriptorFailure(
                        path=str(path),
                        error_type=type(e).__name__,
                        message=str(e),
                    )

        outcomes = await asyncio.gather(*(process(path) for path in descriptors))

        report = ScanReport(root_path=str(root), pattern=self._config.include_pattern)
        for outcome in outcomes:
            if isinstance(outcome, DescriptorFailure):
                report.failures.append(outcome)
            else:
                report.results.append(outcome)

        report.duration_seconds = time.monotonic() - started
        return report

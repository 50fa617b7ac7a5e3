"""
Audit orchestration: load documents from a target and run the engine on each.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import httpx
import structlog

from a11ycheck.config import Config
from a11ycheck.engine.engine import AuditEngine
from a11ycheck.exceptions import TargetNotFoundError
from a11ycheck.protocols import Diagnostic
from a11ycheck.sources import PageFetcher, discover_files, is_url

logger = structlog.get_logger(__name__)


@dataclass
class AuditReport:
    """Outcome of auditing one target (a URL, a file or a directory tree)."""

    target: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    documents: int = 0
    # (label, reason) for documents that could not be read
    failures: List[Tuple[str, str]] = field(default_factory=list)
    duration: float = 0.0

    @property
    def has_issues(self) -> bool:
        return bool(self.diagnostics or self.failures)


class AuditPipeline:
    """
    Runs the audit engine over every document of a target.

    Documents are independent, so files are read and analyzed in worker
    threads, at most ``scan.max_concurrency`` at a time. Results are
    assembled in discovery order, keeping reports reproducible.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        engine: Optional[AuditEngine] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or Config()
        self.engine = engine or AuditEngine(self.config.rule_flags())
        self._transport = transport

    async def audit_target(self, target: str) -> AuditReport:
        """Audit a URL, a directory or a single file.

        Raises:
            FetchError: If a URL cannot be loaded
            TargetNotFoundError: If the target is neither a URL nor an existing path
        """
        structlog.contextvars.bind_contextvars(audit_target=target)
        try:
            if is_url(target):
                return await self.audit_url(target)
            path = Path(target)
            if not path.exists():
                raise TargetNotFoundError(target)
            files = discover_files(path, self.config.scan.allowed_extensions, self.config.scan.excluded_dirs)
            return await self.audit_paths(files, target=target)
        finally:
            structlog.contextvars.unbind_contextvars("audit_target")

    async def audit_url(self, url: str) -> AuditReport:
        start = time.perf_counter()
        async with PageFetcher(self.config.fetch, transport=self._transport) as fetcher:
            html = await fetcher.fetch(url)
        diagnostics = await asyncio.to_thread(self.engine.analyze_source, html, url)
        return AuditReport(
            target=url,
            diagnostics=diagnostics,
            documents=1,
            duration=time.perf_counter() - start,
        )

    async def audit_paths(self, paths: Sequence[Path], target: Optional[str] = None) -> AuditReport:
        start = time.perf_counter()
        semaphore = asyncio.Semaphore(self.config.scan.max_concurrency)

        async def audit_one(path: Path) -> Tuple[str, Optional[List[Diagnostic]], Optional[str]]:
            async with semaphore:
                try:
                    return str(path), await asyncio.to_thread(self._audit_file, path), None
                except OSError as e:
                    logger.warning("Cannot read document", path=str(path), error=str(e))
                    return str(path), None, str(e)

        results = await asyncio.gather(*(audit_one(p) for p in paths))

        report = AuditReport(target=target or ", ".join(str(p) for p in paths))
        for label, diagnostics, error in results:
            if error is not None:
                report.failures.append((label, error))
                continue
            report.documents += 1
            report.diagnostics.extend(diagnostics or [])
        report.duration = time.perf_counter() - start

        logger.info(
            "Audit completed",
            documents=report.documents,
            diagnostics=len(report.diagnostics),
            failures=len(report.failures),
            duration=round(report.duration, 3),
        )
        return report

    def _audit_file(self, path: Path) -> List[Diagnostic]:
        source = path.read_text(encoding=self.config.scan.encoding, errors="replace")
        return self.engine.analyze_source(source, str(path))

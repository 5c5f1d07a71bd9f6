# SPDX-License-Identifier: MIT
"""
Concurrency-bounded scan pipeline.

Files are enumerated up front, then scanned by at most
``MAX_CONCURRENT_FILES`` tasks at a time. Once the finding cap is reached no
new file is started; files already in flight are allowed to finish.
"""
from __future__ import annotations

import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os
from tqdm import tqdm

from leaksniff.core.findings import Finding, ScanStats, meets_severity
from leaksniff.detectors.matcher import detect_secrets_in_text, normalize_path
from leaksniff.scanner.classifier import is_binary, is_text_candidate
from leaksniff.scanner.config import ScanOptions
from leaksniff.scanner.files import list_files
from leaksniff.scanner.ignore import IgnoreMatcher, build_ignore_matcher, should_ignore_path

logger = logging.getLogger(__name__)

MAX_CONCURRENT_FILES = 16
PROGRESS_INTERVAL_SECONDS = 0.12


class PipelineState(Enum):
    IDLE = "idle"
    ENUMERATING = "enumerating"
    SCANNING = "scanning"
    STOPPING = "stopping"
    DONE = "done"


@dataclass
class ScanResult:
    findings: List[Finding]
    stats: ScanStats


class _Collector:
    """Owns every piece of state shared between file tasks."""

    def __init__(self, max_findings: Optional[int]):
        self.max_findings = max_findings
        self.findings: List[Finding] = []
        self.stats = ScanStats()
        self.stopped = False
        self._lock = asyncio.Lock()

    async def add(self, findings: List[Finding]) -> bool:
        """Append findings; return True when this call reached the cap."""
        async with self._lock:
            self.findings.extend(findings)
            self.stats.findings = len(self.findings)
            if self.max_findings and not self.stopped and len(self.findings) >= self.max_findings:
                self.stopped = True
                return True
            return False

    async def file_done(self) -> None:
        async with self._lock:
            self.stats.files_scanned += 1


async def scan_file(path: Path, options: ScanOptions) -> List[Finding]:
    """
    Scan one file and return its findings.

    Unreadable files contribute no findings. Non-text and oversized files are
    skipped without reading their content; binary files are read once and
    dropped. Findings carry the absolute path.
    """
    file_path = normalize_path(str(path))
    try:
        stat = await aiofiles.os.stat(path)
        if not is_text_candidate(path, stat.st_size, options.max_file_size):
            return []
        async with aiofiles.open(path, "rb") as f:
            data = await f.read()
    except OSError as e:
        logger.debug(f"Failed to read {file_path}: {e}")
        return []

    if is_binary(data):
        return []

    text = data.decode("utf-8", errors="replace")
    return detect_secrets_in_text(
        text,
        file_path,
        entropy_threshold=options.entropy_threshold,
        ignore_patterns=options.ignore_regexes,
    )


class ScanPipeline:
    """Drives one scan: Idle -> Enumerating -> Scanning -> (Stopping) -> Done."""

    def __init__(self, options: ScanOptions, concurrency: int = MAX_CONCURRENT_FILES):
        self.options = options
        self.concurrency = concurrency
        self.state = PipelineState.IDLE

    def _relative_path(self, path: Path, base: Path) -> str:
        return normalize_path(os.path.relpath(path, base))

    def _is_path_suppressed(self, relative_path: str, matcher: Optional[IgnoreMatcher]) -> bool:
        if not relative_path or relative_path == "." or relative_path.startswith(".."):
            return True
        if should_ignore_path(relative_path, matcher):
            return True
        return any(rx.search(relative_path) for rx in self.options.ignore_regexes)

    async def _process_file(
        self,
        path: Path,
        base: Path,
        matcher: Optional[IgnoreMatcher],
        collector: _Collector,
        semaphore: asyncio.Semaphore,
        pbar: tqdm,
    ) -> None:
        async with semaphore:
            if collector.stopped:
                return
            relative_path = self._relative_path(path, base)
            try:
                if self._is_path_suppressed(relative_path, matcher):
                    logger.debug(f"Ignored: {relative_path}")
                    return

                file_findings = await scan_file(path, self.options)
                kept = [
                    finding.with_file(relative_path)
                    for finding in file_findings
                    if meets_severity(finding.severity, self.options.severity)
                ]
                if kept and await collector.add(kept):
                    self.state = PipelineState.STOPPING
                    logger.info(f"Reached max findings ({self.options.max_findings}), stopping")
                await collector.file_done()
            except Exception as e:
                logger.warning(f"Scan task failed for {relative_path}: {e}")
            finally:
                pbar.update(1)

    async def run(self) -> ScanResult:
        options = self.options

        self.state = PipelineState.ENUMERATING
        files = await asyncio.get_running_loop().run_in_executor(None, list_files, options.root)
        base = options.root if options.root.is_dir() else options.root.parent
        matcher = build_ignore_matcher(str(options.ignore_file) if options.ignore_file else None)
        logger.debug(f"Found {len(files)} candidate files under {options.root}")

        self.state = PipelineState.SCANNING
        collector = _Collector(options.max_findings)
        semaphore = asyncio.Semaphore(self.concurrency)
        show_progress = bool(options.progress) and sys.stderr.isatty()

        with tqdm(
            total=len(files),
            desc="Scanning",
            unit="file",
            mininterval=PROGRESS_INTERVAL_SECONDS,
            disable=not show_progress,
        ) as pbar:
            await asyncio.gather(
                *(
                    self._process_file(path, base, matcher, collector, semaphore, pbar)
                    for path in files
                )
            )

        findings = collector.findings
        if options.max_findings:
            findings = findings[: options.max_findings]

        self.state = PipelineState.DONE
        logger.debug(
            f"Scan complete: {collector.stats.files_scanned} files, {len(findings)} findings"
        )
        return ScanResult(findings=findings, stats=collector.stats)


async def scan_path_async(options: ScanOptions) -> ScanResult:
    return await ScanPipeline(options).run()


def scan_path(options: ScanOptions) -> ScanResult:
    """Run a full scan and return the findings together with its stats."""
    return asyncio.run(scan_path_async(options))

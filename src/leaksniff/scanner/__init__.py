"""Public API for the leaksniff scan pipeline.

    from leaksniff.scanner import resolve_scan_options, scan_path

    result = scan_path(resolve_scan_options("path/to/repo", severity="high"))
"""

from .classifier import is_scannable, is_text_candidate, looks_like_text
from .config import ScanOptions, load_scan_config, resolve_scan_options
from .ignore import IgnoreMatcher, build_ignore_matcher, should_ignore_path
from .pipeline import ScanPipeline, ScanResult, scan_file, scan_path, scan_path_async

__all__ = [
    "IgnoreMatcher",
    "ScanOptions",
    "ScanPipeline",
    "ScanResult",
    "build_ignore_matcher",
    "is_scannable",
    "is_text_candidate",
    "load_scan_config",
    "looks_like_text",
    "resolve_scan_options",
    "scan_file",
    "scan_path",
    "scan_path_async",
    "should_ignore_path",
]

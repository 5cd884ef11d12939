"""Markup discovery and class extraction."""

from .discovery import DiscoveryResult, discover_markup_files, relative_label
from .extraction import (
    ClassPatterns,
    compile_patterns,
    extract_file,
    extract_markup,
    extract_valid_classes,
    extract_values_by_prefix,
)
from .models import ExtractedOccurrence, ExtractionResult, FileExtraction, SkippedPath

__all__ = [
    "ClassPatterns",
    "DiscoveryResult",
    "ExtractedOccurrence",
    "ExtractionResult",
    "FileExtraction",
    "SkippedPath",
    "compile_patterns",
    "discover_markup_files",
    "extract_file",
    "extract_markup",
    "extract_valid_classes",
    "extract_values_by_prefix",
    "relative_label",
]

"""
Validators - Batch scanning and reporting.

Provides:
- TokenValidator: scan a file tree for non-semantic tokens
- ValidationReport / ValidationReportGenerator: aggregated results
- ReportFormatter / ReportMode: summary and detailed text output
"""

from .report import (
    FileFailure,
    FileScanResult,
    SuggestionCount,
    TokenViolation,
    ValidationReport,
    ValidationReportGenerator,
)
from .report_formatter import ReportFormatter, ReportMode
from .token_validator import TokenValidator

__all__ = [
    "FileFailure",
    "FileScanResult",
    "SuggestionCount",
    "TokenViolation",
    "ValidationReport",
    "ValidationReportGenerator",
    "ReportFormatter",
    "ReportMode",
    "TokenValidator",
]

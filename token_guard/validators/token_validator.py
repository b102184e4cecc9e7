"""
Token Validator - Batch scan of a source tree for non-semantic tokens.

Discovers source files, lints each one with the rule engine, adds
direct `--palette-*` CSS variable usages, optionally applies fixes,
and aggregates everything into a ValidationReport.

One unreadable or unparseable file is recorded as a FileFailure and
never aborts the scan.

Usage:
    from token_guard.validators import TokenValidator

    validator = TokenValidator()
    report = validator.validate("packages/", fix=False)
    print(report.total_violations)
"""

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple, Union

from bs4.builder import ParserRejectedMarkup

from ..analyzers.source_extractor import LineIndex
from ..contracts.categories import Category, Severity
from ..core.config import Settings, settings as default_settings
from ..exceptions import TokenGuardError
from ..rules.fix_applier import apply_fixes
from ..rules.rule_engine import RuleEngine, create_default_engine
from ..suggestions.resolver import SuggestionResolver
from .report import (
    FileFailure,
    FileScanResult,
    TokenViolation,
    ValidationReport,
    ValidationReportGenerator,
)


logger = logging.getLogger(__name__)


class TokenValidator:
    """
    Scans files and directories for non-semantic token usage.

    The validator holds no per-scan state, so one instance can be
    reused and its files scanned from several threads.
    """

    PALETTE_VARIABLE = re.compile(r"--palette-[\w-]+")
    PALETTE_RULE = "no-palette-variables"
    PALETTE_HINT = "Use a semantic color variable instead of a palette variable"

    TEST_FILE = re.compile(r"\.(test|spec)\.[^.]+$")

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[RuleEngine] = None,
    ):
        """
        Initialize the validator.

        Args:
            settings: Settings to use (defaults to the environment settings)
            engine: Pre-built rule engine (defaults to one built from settings)

        Raises:
            ConfigurationError: If the settings produce invalid rule options
        """
        self._settings = settings or default_settings
        if engine is None:
            resolver = SuggestionResolver(self._settings.MAX_SUGGESTION_DISTANCE)
            engine = create_default_engine(self._settings.rule_options(), resolver)
        self._engine = engine

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def validate(
        self,
        path: Union[str, Path],
        fix: bool = False,
        include_tests: Optional[bool] = None,
        workers: Optional[int] = None,
    ) -> ValidationReport:
        """
        Scan a file or directory tree.

        Args:
            path: File or directory to scan
            fix: Apply the preferred candidate of every fixable violation
            include_tests: Scan *.test.* / *.spec.* files (defaults to settings)
            workers: Parallel file workers (defaults to settings)

        Returns:
            ValidationReport

        Raises:
            TokenGuardError: If the path does not exist
        """
        root = Path(path)
        if not root.exists():
            raise TokenGuardError(f"Path not found: {root}")

        if include_tests is None:
            include_tests = self._settings.INCLUDE_TESTS
        workers = workers or self._settings.WORKERS

        files, skipped = self.discover(root, include_tests)
        logger.info(
            f"Scanning {len(files)} file(s) under {root} "
            f"({skipped} skipped by exceptions, workers={workers})"
        )

        if workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(lambda f: self.scan_file(f[0], f[1], fix), files))
        else:
            results = [self.scan_file(file, display, fix) for file, display in files]

        generator = ValidationReportGenerator(self._settings.TOP_SUGGESTIONS)
        report = generator.generate(results, skipped_files=skipped, fix_mode=fix)

        logger.info(
            f"Scan complete: {report.total_violations} violation(s) in "
            f"{report.files_with_violations}/{report.total_files} file(s), "
            f"{len(report.failures)} failure(s)"
        )
        return report

    # =========================================================================
    # DISCOVERY
    # =========================================================================

    def discover(
        self, root: Path, include_tests: bool = False
    ) -> Tuple[List[Tuple[Path, str]], int]:
        """
        Find the files to scan.

        Args:
            root: File or directory
            include_tests: Keep test files

        Returns:
            Tuple of ([(path, display path)] sorted by display path, skipped count)
        """
        if root.is_file():
            candidates = [(root, root.as_posix())]
        else:
            candidates = []
            ignored = set(self._settings.IGNORED_DIRECTORIES)
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = sorted(d for d in dirnames if d not in ignored)
                for filename in sorted(filenames):
                    file = Path(dirpath) / filename
                    candidates.append((file, file.relative_to(root).as_posix()))

        extensions = tuple(ext.lower() for ext in self._settings.FILE_EXTENSIONS)
        files = []
        skipped = 0
        for file, display in candidates:
            if not file.name.lower().endswith(extensions):
                continue
            if not include_tests and self.is_test_file(file):
                continue
            if self._engine.is_excepted(file.as_posix()):
                logger.debug(f"Skipping excepted file: {display}")
                skipped += 1
                continue
            files.append((file, display))

        files.sort(key=lambda item: item[1])
        return files, skipped

    @classmethod
    def is_test_file(cls, path: Path) -> bool:
        """Check for *.test.* and *.spec.* files."""
        return bool(cls.TEST_FILE.search(path.name))

    # =========================================================================
    # PER-FILE SCAN
    # =========================================================================

    def scan_file(self, path: Path, display: str, fix: bool = False) -> FileScanResult:
        """
        Scan one file.

        Args:
            path: File to read
            display: Path used in the report
            fix: Rewrite the file with preferred candidates

        Returns:
            FileScanResult; read/parse errors become a FileFailure
        """
        try:
            source = path.read_text(encoding="utf-8")
            diagnostics = self._engine.lint(path.as_posix(), source)
        except (OSError, UnicodeDecodeError, ParserRejectedMarkup) as e:
            logger.warning(f"Failed to scan {display}: {e}")
            return FileScanResult(file=display, failure=FileFailure(display, str(e)))

        lines = LineIndex(source)
        violations = [
            TokenViolation.from_diagnostic(d, display, lines.line_text(d.line))
            for d in diagnostics
        ]
        violations.extend(self._palette_violations(source, display, lines))

        fixes_applied = 0
        if fix and diagnostics:
            result = apply_fixes(source, diagnostics)
            if result.changed:
                try:
                    path.write_text(result.source, encoding="utf-8")
                except OSError as e:
                    logger.warning(f"Failed to write fixes to {display}: {e}")
                    return FileScanResult(
                        file=display, failure=FileFailure(display, f"write failed: {e}")
                    )
                fixes_applied = len(result.applied)
                logger.info(f"Applied {fixes_applied} fix(es) to {display}")

        return FileScanResult(file=display, violations=violations, fixes_applied=fixes_applied)

    def _palette_violations(
        self, source: str, display: str, lines: LineIndex
    ) -> List[TokenViolation]:
        """Direct --palette-* CSS variable usages."""
        violations = []
        for match in self.PALETTE_VARIABLE.finditer(source):
            line, column = lines.position(match.start())
            violations.append(
                TokenViolation(
                    file=display,
                    line=line,
                    column=column,
                    class_name=match.group(0),
                    category=Category.COLOR,
                    severity=Severity.ERROR,
                    hint=self.PALETTE_HINT,
                    context=lines.line_text(line).strip(),
                    rule=self.PALETTE_RULE,
                )
            )
        return violations

"""Pipeline orchestration for the unused-asset report."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Set

from .asset_scanner import AssetTreeScanner
from .config import AuditConfig, ConfigError, load_config
from .logging import SUMMARY, get_logger
from .manifest import ManifestMissingError, ManifestParser, ManifestUnreadableError
from .models import RunOutcome, RunStatus
from .reconciler import Reconciler, SizeLookup, stat_size_lookup
from .references import ReferencePattern, ReferenceScanner, build_patterns
from .report import ReportFormatter


class Orchestrator:
    """Runs manifest parsing, scanning, reconciliation and reporting for a project."""

    def __init__(
        self,
        formatter: ReportFormatter | None = None,
        size_lookup_factory: Callable[[Path], SizeLookup] = stat_size_lookup,
    ) -> None:
        self.formatter = formatter or ReportFormatter()
        self._size_lookup_factory = size_lookup_factory
        self.logger = get_logger("orchestrator")

    def run_report(self, path: str | Path) -> RunOutcome:
        """Analyze the project at ``path`` and write the report beside its manifest.

        Never raises for expected conditions; the returned outcome carries the status.
        """
        project_root = Path(path).expanduser().resolve()
        self.logger.info("Analyzing assets in %s", project_root)
        if not project_root.is_dir():
            message = f"Error: project directory not found: {project_root}"
            self.logger.error(message)
            return RunOutcome(RunStatus.MANIFEST_MISSING, project_root, message)

        try:
            config = load_config(project_root)
            patterns = build_patterns(
                extensions=config.asset_extensions,
                root=config.root_segment,
                enabled=config.patterns.enabled,
                custom=config.patterns.custom,
            )
        except ConfigError as exc:
            self.logger.error("Invalid configuration: %s", exc)
            return RunOutcome(RunStatus.CONFIG_ERROR, project_root, str(exc))

        parser = ManifestParser(
            root=config.root_segment,
            section=config.manifest_section.section,
            list_key=config.manifest_section.list_key,
        )
        try:
            declarations = parser.load(config.manifest_path)
        except ManifestMissingError:
            message = (
                f"Error: {config.manifest} not found. "
                "Are you in a Flutter project directory?"
            )
            self.logger.error(message)
            return RunOutcome(RunStatus.MANIFEST_MISSING, project_root, message)
        except ManifestUnreadableError as exc:
            self.logger.error("%s", exc)
            return RunOutcome(RunStatus.MANIFEST_UNREADABLE, project_root, str(exc))

        if not declarations:
            message = f"No assets declared in {config.manifest}"
            self.logger.info(message)
            return RunOutcome(RunStatus.NO_DECLARATIONS, project_root, message)
        self.logger.debug("Manifest declares %d asset entries", len(declarations))

        tree = AssetTreeScanner(config.root_segment, config.exclude_paths).scan(
            config.assets_path
        )
        if not tree.exists:
            self.logger.warning('Assets folder "%s" not found.', config.assets_path)
        if not tree.paths:
            message = f'No assets found in the "{config.assets_path}" folder.'
            self.logger.info(message)
            return RunOutcome(RunStatus.NO_ASSETS, project_root, message)
        self.logger.debug("Found %d files under %s", len(tree.paths), config.assets_path)

        references = self._scan_references(config, patterns)

        reconciler = Reconciler(self._size_lookup_factory(config.root))
        result = reconciler.reconcile(tree.paths, references, declarations)
        for unsized in result.unsized_assets:
            self.logger.debug("Size unavailable for %s; omitted from totals", unsized)

        try:
            report_path = self.formatter.write(result, config.report_path)
        except OSError as exc:
            message = f"Failed to write report to {config.report_path}: {exc}"
            self.logger.error(message)
            return RunOutcome(RunStatus.REPORT_FAILED, project_root, message, result=result)
        for line in self.formatter.summary(result, report_path):
            self.logger.info("%s", line, extra=SUMMARY)

        return RunOutcome(
            RunStatus.COMPLETED,
            project_root,
            f"Report written to {report_path}",
            result=result,
            report_path=report_path,
        )

    def _scan_references(
        self, config: AuditConfig, patterns: Sequence[ReferencePattern]
    ) -> Set[str]:
        scanner = ReferenceScanner(
            patterns=patterns,
            source_extensions=config.source_extensions,
            root_segment=config.root_segment,
            exclude_paths=config.exclude_paths,
        )
        scan = scanner.scan(config.source_path)
        if not scan.exists:
            self.logger.warning('Source folder "%s" not found.', config.source_path)
        for skipped in scan.skipped_files:
            self.logger.warning("Skipping unreadable source file %s", skipped)
        self.logger.debug(
            "Scanned %d source files, %d asset references",
            scan.files_scanned,
            len(scan.references),
        )
        return scan.references


__all__ = ["Orchestrator"]

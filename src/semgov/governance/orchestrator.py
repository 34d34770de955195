"""Apply and check pipelines over changed plugins."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from semgov.git_ops import ChangeLocator, ComparisonScope, DiffSource
from semgov.oracle.classifier import BumpVerdict, VersionBumpClassifier
from semgov.plugins.store import ManifestStore
from semgov.utils.versioning import BumpKind, next_version

from .result import BumpOutcome, BumpStatus, CheckReport

logger = logging.getLogger(__name__)


class GovernanceOrchestrator:
    """Tie diff source, locator, classifier and manifest store together.

    Every side effect goes through the injected collaborators, so the
    pipelines can run against synthetic diffs and fake oracles.
    """

    def __init__(
        self,
        diff_source: DiffSource,
        locator: ChangeLocator,
        classifier: VersionBumpClassifier,
        store: ManifestStore,
    ) -> None:
        self.diff_source = diff_source
        self.locator = locator
        self.classifier = classifier
        self.store = store

    def apply(
        self,
        plugin: str,
        scope: ComparisonScope,
        on_verdict: Optional[Callable[[BumpVerdict], None]] = None,
    ) -> BumpOutcome:
        """Classify a plugin's changes and bump its manifest version if warranted.

        Args:
            plugin: Plugin identifier.
            scope: Changes to consider.
            on_verdict: Called with the verdict before the manifest is touched.

        Returns:
            What happened to the plugin.

        Raises:
            ManifestError: If the manifest is missing or malformed.
            ClassificationError: If the oracle gives no usable decision.
        """
        diff = self.diff_source.get_diff(plugin, scope)
        if not diff.strip():
            logger.info(f"No changes detected for {plugin}")
            return BumpOutcome(plugin=plugin, status=BumpStatus.NO_CHANGES)

        manifest = self.store.load(plugin)
        verdict = self.classifier.classify_bump(plugin, diff)
        if on_verdict is not None:
            on_verdict(verdict)

        if verdict.kind is BumpKind.NONE:
            return BumpOutcome(
                plugin=plugin,
                status=BumpStatus.NOT_REQUIRED,
                verdict=verdict,
                old_version=manifest.version,
                new_version=manifest.version,
            )

        new_version = next_version(manifest.semantic_version, verdict.kind)
        self.store.save(plugin, manifest.with_version(new_version))
        logger.info(f"Bumped {plugin}: {manifest.version} -> {new_version}")
        return BumpOutcome(
            plugin=plugin,
            status=BumpStatus.BUMPED,
            verdict=verdict,
            old_version=manifest.version,
            new_version=str(new_version),
        )

    def requires_bump(self, plugin: str, scope: ComparisonScope, refresh: bool = True) -> bool:
        """Binary check for one plugin; an empty diff never requires a bump."""
        diff = self.diff_source.get_diff(plugin, scope, refresh=refresh)
        if not diff.strip():
            return False
        return self.classifier.classify_required(diff)

    def check(self, scope: ComparisonScope, max_workers: int = 1) -> CheckReport:
        """Find changed plugins whose diffs require a version bump.

        Only the oracle's judgment of each diff is consulted; the manifest's
        current version is not compared against the base.

        Args:
            scope: Changes to consider.
            max_workers: Plugins checked concurrently; 1 keeps the loop sequential.
        """
        plugins = sorted(self.locator.list_changed_plugins(scope))
        report = CheckReport()
        if not plugins:
            return report

        # The locator has just fetched the base.
        def needs_bump(plugin: str) -> bool:
            return self.requires_bump(plugin, scope, refresh=False)

        if max_workers > 1:
            with ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="semgov-check"
            ) as pool:
                report.required = dict(zip(plugins, pool.map(needs_bump, plugins)))
        else:
            report.required = {p: needs_bump(p) for p in plugins}

        report.manifest_paths = {
            p: self.store.config.manifest_relpath(p) for p in report.non_compliant
        }
        logger.info(
            f"Checked {len(plugins)} plugin(s), "
            f"{len(report.non_compliant)} need a version update"
        )
        return report

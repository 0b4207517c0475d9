"""Project documentation runs.

This module wires the pieces of a run together: it validates the root directory,
walks it with the configured exclusions and depth bound, asks the collaborators for
versions and packages, and hands everything to the report builder.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from project2md import __version__
from project2md.config import DocumentationConfig
from project2md.environment.database import DatabaseProbe
from project2md.environment.manifest import DEFAULT_READERS, ManifestReader, read_manifest
from project2md.environment.versions import VersionProvider
from project2md.exceptions import InvalidRootError
from project2md.exclusion_rules.base_rules import BaseExclusionRules
from project2md.exclusion_rules.composite_rules import CompositeExclusionRules
from project2md.exclusion_rules.name_rules import NameExclusionRules
from project2md.exclusion_rules.pattern_rules import PatternExclusionRules
from project2md.file_system_tree.entry import Entry
from project2md.file_system_tree.size_cache import SizeCache
from project2md.file_system_tree.tree_walker import TreeWalker
from project2md.report.builder import BuiltReport, ReportBuilder
from project2md.report.models import UNAVAILABLE, UNKNOWN, Manifest, ReportMetadata, VersionInfo
from project2md.types import PathType

logger = logging.getLogger(__name__)

PROJECT_MARKERS = ("pyproject.toml", "setup.py", "setup.cfg", "composer.json", "package.json", ".git")


def find_project_root(start: Optional[PathType] = None) -> Path:
    """Find the root of the project containing a directory.

    Walks up from ``start`` (default: the working directory) to the first directory
    holding a project marker such as ``pyproject.toml`` or ``.git``.

    Returns:
        The project root, or ``start`` itself if no ancestor has a marker.
    """
    origin = Path(start) if start is not None else Path.cwd()
    origin = origin.resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return origin


def validate_root(root: PathType) -> Path:
    """Check that a root path exists and is a directory.

    Raises:
        InvalidRootError: If the path is missing or not a directory.
    """
    path = Path(root)
    if not path.exists():
        raise InvalidRootError(str(root), "does not exist")
    if not path.is_dir():
        raise InvalidRootError(str(root), "not a directory")
    return path


def build_exclusion_rules(
    default_names: Iterable[str],
    extra_names: Iterable[str] = (),
    patterns: Sequence[str] = (),
) -> Optional[BaseExclusionRules]:
    """Combine literal names and optional wildcard patterns into one rule object.

    Returns:
        The rules, or None if nothing at all is excluded.
    """
    candidates: List[BaseExclusionRules] = [
        NameExclusionRules(default_names, extra=extra_names),
        PatternExclusionRules(patterns),
    ]
    active = [rules for rules in candidates if rules.has_rules()]
    if not active:
        return None
    if len(active) == 1:
        return active[0]
    return CompositeExclusionRules(active)


class ProjectDocumenter:
    """Documents one project directory.

    The root is validated once, on construction; that is the only failure a run can
    have. Everything else (unreadable files, a corrupt lock file, an unreachable
    database) is replaced by a documented default and the run completes.

    Each documenter owns its own SizeCache, so separate documenters never share state
    and may be used for concurrent runs as long as they write to different outputs.

    Attributes:
        root_path (Path): Directory being documented.
        config (DocumentationConfig): Settings of the run.
        max_depth (Optional[int]): Effective maximum depth, None for unbounded.
        exclusion_rules (Optional[BaseExclusionRules]): Rules applied to every entry name.
        excluded_files (Tuple[str, ...]): Individual files left out, such as the report artifacts.

    Example:
        >>> documenter = ProjectDocumenter(".", max_depth=1)  # doctest: +SKIP
        >>> markdown, record = documenter.build()  # doctest: +SKIP
        >>> print(markdown.splitlines()[0])  # doctest: +SKIP
        # Project structure for `project2md`

    Raises:
        InvalidRootError: If the root does not exist or is not a directory.
    """

    def __init__(
        self,
        root: PathType,
        *,
        config: Optional[DocumentationConfig] = None,
        extra_excludes: Iterable[str] = (),
        ignore_patterns: Sequence[str] = (),
        max_depth: Optional[int] = None,
        version_provider: Optional[VersionProvider] = None,
        database_probe: Optional[DatabaseProbe] = None,
        manifest_readers: Sequence[ManifestReader] = DEFAULT_READERS,
        builder: Optional[ReportBuilder] = None,
        excluded_files: Iterable[PathType] = (),
    ) -> None:
        """Initialize a documentation run.

        Args:
            root: Directory to document.
            config: Settings; defaults to DocumentationConfig().
            extra_excludes: Literal names excluded in addition to the configured ones.
            ignore_patterns: Gitignore-style patterns matched against entry names.
            max_depth: Maximum depth; None falls back to the configured depth.
            version_provider: Framework/runtime version lookup.
            database_probe: Database version probe.
            manifest_readers: Lock-file readers tried in order.
            builder: Report builder.
            excluded_files: Files left out of the listing and the sizes, typically the
                paths the report is about to be written to.

        Raises:
            InvalidRootError: If the root does not exist or is not a directory.
        """
        self.root_path = validate_root(root)
        self.config = config or DocumentationConfig()
        self.max_depth = max_depth if max_depth is not None else self.config.max_depth
        self.exclusion_rules = build_exclusion_rules(self.config.exclude_names, extra_excludes, ignore_patterns)

        self._version_provider = version_provider or VersionProvider(self.config.framework)
        self._database_probe = database_probe or DatabaseProbe(self.config.database_url, self.config.database_query)
        self._manifest_readers = manifest_readers
        self._builder = builder or ReportBuilder()

        self.excluded_files = tuple(os.fspath(path) for path in excluded_files)
        self.size_cache = SizeCache(self.exclusion_rules, self.max_depth, self.excluded_files)
        self._walker = TreeWalker(
            self.root_path, self.exclusion_rules, self.max_depth, self.size_cache, excluded_files=self.excluded_files
        )
        self._entries: Optional[List[Entry]] = None

    @property
    def project_name(self) -> str:
        """Name of the root directory, or the whole path for a filesystem root."""
        resolved = self.root_path.resolve()
        return resolved.name or str(resolved)

    def collect_entries(self) -> List[Entry]:
        """Walk the project tree. The walk happens once; later calls reuse its result."""
        if self._entries is None:
            self._entries = self._walker.walk()
            logger.debug("Collected %d entries below %s", len(self._entries), self.root_path)
        return self._entries

    def read_manifest(self) -> Optional[Manifest]:
        if not self.config.include_package_info:
            return None
        return read_manifest(self.root_path, self._manifest_readers)

    def gather_versions(self, manifest: Optional[Manifest] = None) -> VersionInfo:
        """Ask the collaborators for version strings, substituting the sentinels."""
        provider = self._version_provider
        database = self._database_probe.server_version()
        if database is None:
            database = UNAVAILABLE
        elif not database:
            database = UNKNOWN
        return VersionInfo(
            framework=provider.framework_version(manifest) or UNKNOWN,
            runtime=provider.runtime_version() or UNKNOWN,
            database=database,
            framework_name=provider.framework_label,
            runtime_name=provider.runtime_name,
        )

    def gather_metadata(self, generated_at: Optional[datetime] = None) -> ReportMetadata:
        """Collect the report header.

        Args:
            generated_at: Generation time; defaults to now.
        """
        manifest = self.read_manifest()
        return ReportMetadata(
            project_name=self.project_name,
            root_path=str(self.root_path.resolve()),
            generated_at=generated_at or datetime.now(),
            versions=self.gather_versions(manifest),
            project_type=self.config.project_type,
            generator=f"project2md {__version__}",
            packages=list(manifest.packages) if manifest else [],
            discoverable=list(manifest.discoverable) if manifest else [],
        )

    def build(self, generated_at: Optional[datetime] = None) -> BuiltReport:
        """Run the whole documentation pass.

        Returns:
            The markdown document and the structured record.
        """
        return self._builder.build(self.collect_entries(), self.gather_metadata(generated_at))

    def serialize_record(self, built: BuiltReport) -> str:
        return self._builder.serialize_record(built.record)

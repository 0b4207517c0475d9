"""Readers for package lock files.

A manifest reader looks for one lock-file format in the project root and turns it
into a Manifest. Readers never raise for missing or malformed files: they log the
problem and return None, and the next reader gets its turn.
"""

import json
import logging
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Sequence

from project2md.report.models import DiscoverablePackage, Manifest, PackageInfo
from project2md.types import PathType

logger = logging.getLogger(__name__)


class ManifestReader(ABC):
    """Abstract base class for lock-file readers.

    Subclasses name the file they read and implement ``load`` (file to raw data) and
    ``parse`` (raw data to Manifest). Any error in either step makes ``read`` return
    None.

    Attributes:
        filename (str): Lock-file name looked up in the project root.
    """

    filename: str = ""

    def read(self, root: PathType) -> Optional[Manifest]:
        """Read the lock file below a project root.

        Args:
            root: Project root directory.

        Returns:
            The parsed manifest, or None if the file is missing, unreadable or malformed.
        """
        path = Path(root) / self.filename
        if not path.is_file():
            return None
        try:
            return self.parse(self.load(path))
        except (OSError, ValueError, TypeError, AttributeError, KeyError, RecursionError) as e:
            logger.debug("Ignoring unusable %s: %s", path, e)
            return None

    @abstractmethod
    def load(self, path: Path) -> Any:
        pass

    @abstractmethod
    def parse(self, data: Any) -> Manifest:
        pass


class ComposerLockReader(ManifestReader):
    """Reader for PHP ``composer.lock`` files.

    Packages that declare Laravel service providers or facade aliases under
    ``extra.laravel`` are reported as discoverable packages.

    Example:
        >>> data = {"packages": [{"name": "vendor/pkg", "version": "v1.0.0",
        ...     "extra": {"laravel": {"providers": ["VendorServiceProvider"]}}}]}
        >>> manifest = ComposerLockReader().parse(data)
        >>> manifest.packages[0].name, manifest.discoverable[0].providers
        ('vendor/pkg', ['VendorServiceProvider'])
    """

    filename = "composer.lock"

    def load(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def parse(self, data: Any) -> Manifest:
        packages: List[PackageInfo] = []
        discoverable: List[DiscoverablePackage] = []
        for item in data.get("packages") or []:
            if not isinstance(item, dict):
                continue
            name = str(item.get("name") or "")
            version = str(item.get("version") or "")
            packages.append(PackageInfo(name, version))

            extra = item.get("extra")
            laravel = extra.get("laravel") if isinstance(extra, dict) else None
            if not isinstance(laravel, dict):
                continue
            providers = laravel.get("providers") or []
            aliases = laravel.get("aliases") or {}
            if providers or aliases:
                discoverable.append(
                    DiscoverablePackage(
                        name,
                        version,
                        providers=[str(p) for p in providers] if isinstance(providers, list) else [],
                        aliases={str(k): str(v) for k, v in aliases.items()} if isinstance(aliases, dict) else {},
                    )
                )
        return Manifest(self.filename, packages, discoverable)


class TomlLockReader(ManifestReader):
    """Reader for TOML lock files listing ``[[package]]`` tables with name and version.

    Both ``poetry.lock`` and ``uv.lock`` use this layout. Neither records
    auto-registration hooks, so their manifests never have discoverable packages.
    """

    def load(self, path: Path) -> Any:
        with open(path, "rb") as f:
            return tomllib.load(f)

    def parse(self, data: Any) -> Manifest:
        packages = [
            PackageInfo(str(item.get("name") or ""), str(item.get("version") or ""))
            for item in data.get("package") or []
            if isinstance(item, dict)
        ]
        return Manifest(self.filename, packages)


class PoetryLockReader(TomlLockReader):
    filename = "poetry.lock"


class UvLockReader(TomlLockReader):
    filename = "uv.lock"


DEFAULT_READERS: Sequence[ManifestReader] = (ComposerLockReader(), PoetryLockReader(), UvLockReader())


def read_manifest(root: PathType, readers: Sequence[ManifestReader] = DEFAULT_READERS) -> Optional[Manifest]:
    """Read the first usable lock file of a project.

    Args:
        root: Project root directory.
        readers: Readers to try, in order.

    Returns:
        The first manifest any reader could parse, or None.
    """
    for reader in readers:
        manifest = reader.read(root)
        if manifest is not None:
            logger.debug("Read %d packages from %s", len(manifest.packages), reader.filename)
            return manifest
    return None

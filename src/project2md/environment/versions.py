"""Runtime and framework version lookup."""

import logging
import platform
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from project2md.report.models import Manifest

logger = logging.getLogger(__name__)


def installed_version(distribution: str) -> Optional[str]:
    """Version of an installed distribution, or None if it is not installed."""
    try:
        return version(distribution)
    except PackageNotFoundError:
        return None
    except ValueError as e:
        # Raised for names that are not valid distribution names
        logger.debug("Cannot look up %r: %s", distribution, e)
        return None


class VersionProvider:
    """Looks up the versions shown in the report header.

    The framework is identified by its distribution name (e.g. ``django``). Its version
    is taken from the project's lock file when it is listed there, because the project
    may well be documented from outside its own environment, and from the installed
    distributions otherwise.

    Attributes:
        framework (Optional[str]): Distribution name of the framework, None if the
            project has none.

    Example:
        >>> provider = VersionProvider()
        >>> provider.framework_label
        'Framework'
        >>> provider.framework_version() is None
        True
    """

    runtime_name = "Python"

    def __init__(self, framework: Optional[str] = None) -> None:
        self.framework = framework

    @property
    def framework_label(self) -> str:
        return self.framework or "Framework"

    def runtime_version(self) -> Optional[str]:
        return platform.python_version() or None

    def framework_version(self, manifest: Optional[Manifest] = None) -> Optional[str]:
        """Version of the configured framework.

        Args:
            manifest: The project's lock file contents, if any.

        Returns:
            The locked or installed version, or None if it cannot be determined.
        """
        if not self.framework:
            return None
        if manifest is not None:
            locked = manifest.find_version(self.framework)
            if locked:
                return locked
        return installed_version(self.framework)

"""Data carried by a project report besides the entry list."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from project2md.file_system_tree.entry import Entry

UNKNOWN = "Unknown"
UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class PackageInfo:
    """A dependency pinned by the project's lock file."""

    name: str
    version: str


@dataclass(frozen=True)
class DiscoverablePackage:
    """A package that registers itself with the host framework automatically.

    Attributes:
        name: Package name.
        version: Locked version.
        providers: Service providers (or other hooks) the package registers.
        aliases: Alias name to target mapping the package registers.
    """

    name: str
    version: str
    providers: List[str] = field(default_factory=list)
    aliases: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Manifest:
    """Package information read from a lock file."""

    source: str
    packages: List[PackageInfo] = field(default_factory=list)
    discoverable: List[DiscoverablePackage] = field(default_factory=list)

    def find_version(self, name: str) -> Optional[str]:
        """Locked version of a package, compared by normalized name."""
        wanted = normalize_package_name(name)
        for package in self.packages:
            if normalize_package_name(package.name) == wanted:
                return package.version
        return None


@dataclass(frozen=True)
class VersionInfo:
    """Version strings shown in the report header.

    Each value is an opaque string; missing values are replaced by UNKNOWN or
    UNAVAILABLE before they reach this object.
    """

    framework: str = UNKNOWN
    runtime: str = UNKNOWN
    database: str = UNAVAILABLE
    framework_name: str = "Framework"
    runtime_name: str = "Python"


@dataclass(frozen=True)
class ReportMetadata:
    """Header information of a report.

    Attributes:
        project_name: Name shown in the title, normally the root directory's name.
        root_path: The scanned directory as given by the caller.
        generated_at: When the report was generated.
        versions: Framework, runtime and database versions.
        project_type: Free-form description of the kind of project.
        generator: Tool identification shown in the banner.
        packages: Locked packages, empty when package information is disabled or missing.
        discoverable: Packages advertising auto-registration hooks.
    """

    project_name: str
    root_path: str
    generated_at: datetime
    versions: VersionInfo = field(default_factory=VersionInfo)
    project_type: str = "Software Project"
    generator: str = "project2md"
    packages: List[PackageInfo] = field(default_factory=list)
    discoverable: List[DiscoverablePackage] = field(default_factory=list)


@dataclass(frozen=True)
class Report:
    """Everything a report is rendered from: the header and the ordered entries."""

    metadata: ReportMetadata
    entries: List[Entry]


def normalize_package_name(name: str) -> str:
    """Normalize a distribution name the way package indexes compare them.

    Example:
        >>> normalize_package_name("Flask_SQLAlchemy")
        'flask-sqlalchemy'
    """
    return "-".join(part for part in name.lower().replace("_", "-").replace(".", "-").split("-") if part)

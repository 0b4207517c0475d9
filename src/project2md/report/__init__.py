"""Report data and formatting helpers shared by the output strategies."""

from .models import (
    UNAVAILABLE,
    UNKNOWN,
    DiscoverablePackage,
    Manifest,
    PackageInfo,
    Report,
    ReportMetadata,
    VersionInfo,
)

__all__ = [
    "UNAVAILABLE",
    "UNKNOWN",
    "DiscoverablePackage",
    "Manifest",
    "PackageInfo",
    "Report",
    "ReportMetadata",
    "VersionInfo",
]

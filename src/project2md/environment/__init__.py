"""Collaborators supplying report metadata: versions, database and package manifests.

Every collaborator returns None (or an empty result) instead of raising when its
source of information is unavailable.
"""

from .database import DatabaseProbe
from .manifest import ManifestReader, read_manifest
from .versions import VersionProvider

__all__ = ["DatabaseProbe", "ManifestReader", "VersionProvider", "read_manifest"]

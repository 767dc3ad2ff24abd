"""Data models for package identities and release results."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class InvalidPackageNameError(ValueError):
    """Raised when a package name cannot be split into group and artifact."""


@dataclass(frozen=True)
class PackageIdentity:
    """Parsed "group:artifact[_scalaVersion]" coordinates."""
    group_id: str
    artifact_id: str  # raw artifact part, suffix included
    artifact: str  # base artifact name
    scala_version: Optional[str]

    @property
    def package_name(self) -> str:
        """Return the original "group:artifact" form."""
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class Release:
    """A single published version."""
    version: str


@dataclass(frozen=True)
class ArtifactUrls:
    """Auxiliary URLs discovered from an artifact's POM."""
    homepage: Optional[str] = None
    source_url: Optional[str] = None


@dataclass
class ReleaseResult:
    """Resolution outcome for one package."""
    releases: List[Release]
    dependency_url: Optional[str] = None
    homepage: Optional[str] = None
    source_url: Optional[str] = None
    registry_url: Optional[str] = None

    @property
    def versions(self) -> List[str]:
        """Version strings in release order."""
        return [r.version for r in self.releases]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output, omitting unset URLs."""
        out: Dict[str, Any] = {
            "dependencyUrl": self.dependency_url,
            "releases": [{"version": r.version} for r in self.releases],
        }
        if self.homepage:
            out["homepage"] = self.homepage
        if self.source_url:
            out["sourceUrl"] = self.source_url
        if self.registry_url:
            out["registryUrl"] = self.registry_url
        return out

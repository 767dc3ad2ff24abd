"""Release lookup for sbt plugins against a single registry."""
from __future__ import annotations

import logging
from typing import List, Optional

from common.http_client import PageFetcher, ensure_trailing_slash
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from constants import Constants
from registry.sbt_package.client import SbtPackageScanner
from registry.sbt_plugin.walker import PluginTreeWalker
from versioning.models import ArtifactUrls, Release, ReleaseResult
from versioning.parser import group_path, parse_package_name

logger = logging.getLogger(__name__)


def search_roots(registry_url: str, group_id: str) -> List[str]:
    """Candidate group-level URLs for ``group_id`` in ``registry_url``, in lookup order.

    Plugin repositories use the dotted group ("com.example"), Maven ones the
    slashed path ("com/example"). The dotted form is skipped for Maven Central.
    """
    repo_root = ensure_trailing_slash(registry_url)
    roots: List[str] = []
    if not registry_url.startswith(Constants.MAVEN_REPO):
        roots.append(f"{repo_root}{group_path(group_id, '.')}")
    roots.append(f"{repo_root}{group_path(group_id, '/')}")
    return roots


class SbtPluginResolver:
    """Resolve plugin releases, falling back to the generic artifact layout."""

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        *,
        walker: Optional[PluginTreeWalker] = None,
        scanner: Optional[SbtPackageScanner] = None,
    ):
        self.fetcher = fetcher or PageFetcher()
        self.walker = walker or PluginTreeWalker(self.fetcher)
        self.scanner = scanner or SbtPackageScanner(self.fetcher)

    def get_releases(self, package_name: str, registry_url: Optional[str]) -> Optional[ReleaseResult]:
        """Look up ``package_name`` ("group:artifact[_scala]") in one registry.

        Args:
            package_name: sbt coordinates.
            registry_url: Base URL of the repository.

        Returns:
            ReleaseResult from the first search root that has versions, or None.

        Raises:
            InvalidPackageNameError: If ``package_name`` is malformed.
        """
        if not registry_url:
            return None

        identity = parse_package_name(package_name)
        roots = search_roots(registry_url, identity.group_id)

        for root in roots:
            versions = self.walker.walk(root, identity.artifact, identity.scala_version)
            urls = ArtifactUrls()

            if not versions:
                subdirs = self.scanner.list_artifact_subdirs(root, identity.artifact, identity.scala_version)
                versions = self.scanner.list_releases(root, subdirs)
                latest = self.scanner.pick_latest(versions)
                urls = self.scanner.derive_urls(root, subdirs, latest)

            if is_debug_enabled(logger):
                logger.debug("Package versions", extra=extra_context(
                    event="decision", component="sbt_plugin", action="get_releases",
                    target=safe_url(root), package=package_name,
                    count=len(versions) if versions else 0
                ))

            if versions:
                return ReleaseResult(
                    releases=[Release(version=v) for v in versions],
                    dependency_url=f"{root}/{identity.artifact}",
                    homepage=urls.homepage,
                    source_url=urls.source_url,
                    registry_url=registry_url,
                )

        logger.debug("No versions found for %s in %s repositories", package_name, len(roots))
        return None

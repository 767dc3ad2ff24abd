"""Generic Maven-layout scanner for Scala artifacts.

Handles the conventional layout where cross-built artifacts live in
sibling directories named ``<artifact>_<scalaVersion>`` directly under the
group path, each holding one directory per release.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from common.http_client import PageFetcher, ensure_trailing_slash
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from registry.sbt_package.discovery import parse_pom_urls
from registry.sbt_package.util import directory_name, extract_page_links, relative_href
from versioning import maven_compare
from versioning.models import ArtifactUrls

logger = logging.getLogger(__name__)


class SbtPackageScanner:
    """Lists artifact subdirectories, their releases and POM-derived URLs."""

    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        link_extractor=extract_page_links,
        sort_versions: Callable = maven_compare.sort_versions,
        latest_version: Callable = maven_compare.latest_version,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.sort_versions = sort_versions
        self.latest_version = latest_version

    def list_artifact_subdirs(
        self, search_root: str, artifact: str, scala_version: Optional[str]
    ) -> Optional[List[str]]:
        """Return the artifact directories under ``search_root``.

        Keeps ``artifact`` itself and its ``artifact_*`` cross builds, except
        Scala.js and Scala Native ones. Narrows to ``artifact_<scala_version>``
        when that directory exists.

        Returns:
            Directory names, or None when the root listing is unavailable.
        """
        res = self.fetcher.fetch(ensure_trailing_slash(search_root))
        if res is None:
            return None

        def artifact_dir(href: str) -> Optional[str]:
            name = directory_name(relative_href(href, search_root))
            if name is None:
                return None
            if name == artifact:
                return name
            if name.startswith(f"{artifact}_native") or name.startswith(f"{artifact}_sjs"):
                return None
            if name.startswith(f"{artifact}_"):
                return name
            return None

        subdirs = self.link_extractor(res.body, artifact_dir)
        exact = f"{artifact}_{scala_version}"
        if scala_version and exact in subdirs:
            subdirs = [exact]

        if is_debug_enabled(logger):
            logger.debug("Artifact subdirectories", extra=extra_context(
                event="decision", component="sbt_package", action="list_artifact_subdirs",
                target=safe_url(search_root), count=len(subdirs)
            ))
        return subdirs

    def list_releases(
        self, search_root: str, artifact_subdirs: Optional[List[str]]
    ) -> Optional[List[str]]:
        """Collect release directories across ``artifact_subdirs``.

        Returns:
            Deduplicated, sorted versions, or None when nothing was found.
        """
        if not artifact_subdirs:
            return None
        releases: List[str] = []
        for subdir in artifact_subdirs:
            subdir_url = ensure_trailing_slash(f"{search_root}/{subdir}")
            res = self.fetcher.fetch(subdir_url)
            if res is None:
                continue
            releases.extend(self.link_extractor(
                res.body, lambda href, base=subdir_url: directory_name(relative_href(href, base))
            ))
        if not releases:
            return None
        return self.sort_versions(releases)

    def pick_latest(self, versions: Optional[List[str]]) -> Optional[str]:
        """Highest of ``versions`` per the version comparator."""
        return self.latest_version(versions)

    def derive_urls(
        self,
        search_root: str,
        artifact_subdirs: Optional[List[str]],
        version: Optional[str],
    ) -> ArtifactUrls:
        """Read homepage and source URL from the first POM found for ``version``."""
        if not artifact_subdirs or not version:
            return ArtifactUrls()

        for subdir in artifact_subdirs:
            base_artifact = subdir.split("_")[0]
            pom_names = [f"{subdir}-{version}.pom"]
            if base_artifact != subdir:
                pom_names.append(f"{base_artifact}-{version}.pom")
            for pom_name in pom_names:
                pom_url = f"{search_root}/{subdir}/{version}/{pom_name}"
                res = self.fetcher.fetch(pom_url)
                if res is None:
                    continue
                if is_debug_enabled(logger):
                    logger.debug("POM found", extra=extra_context(
                        event="function_exit", component="sbt_package", action="derive_urls",
                        outcome="pom_found", target=safe_url(pom_url)
                    ))
                return parse_pom_urls(res.body)
        return ArtifactUrls()

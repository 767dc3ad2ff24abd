"""Three-level walk over the sbt plugin repository layout.

Plugin releases are published as::

    <root>/<artifact>/scala_<scalaVersion>/sbt_<sbtVersion>/<version>/

so no flat version listing exists at the artifact directory. The walker
descends through the Scala and sbt directories and collects the leaf
version entries.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from common.http_client import PageFetcher, ensure_trailing_slash
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from constants import Constants
from registry.sbt_package.util import extract_page_links, skip_dot_links
from versioning import maven_compare

logger = logging.getLogger(__name__)


class PluginTreeWalker:
    """Enumerate plugin versions below ``<root>/<artifact>``."""

    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        link_extractor=extract_page_links,
        sort_versions: Callable = maven_compare.sort_versions,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.sort_versions = sort_versions

    def _links(self, url: str) -> Optional[List[str]]:
        res = self.fetcher.fetch(ensure_trailing_slash(url))
        if res is None:
            return None
        return self.link_extractor(res.body, skip_dot_links)

    def walk(self, search_root: str, artifact: str, scala_version: Optional[str]) -> List[str]:
        """Return sorted, deduplicated plugin versions, or [] when the layout does not apply.

        Args:
            search_root: Group-level URL, e.g. ".../sbt-plugin-releases/com.example".
            artifact: Base artifact name.
            scala_version: Requested Scala version; when no matching
                ``scala_<v>`` directory exists every Scala directory is searched.
        """
        artifact_root = f"{search_root}/{artifact}"
        scala_dirs = self._links(artifact_root)
        if scala_dirs is None:
            return []

        prefix = Constants.SCALA_DIR_PREFIX
        scala_versions = [d[len(prefix):] if d.startswith(prefix) else d for d in scala_dirs]
        exact = scala_version is not None and scala_version in scala_versions
        search_versions = [scala_version] if exact else scala_versions

        if is_debug_enabled(logger):
            logger.debug("Plugin scala directories", extra=extra_context(
                event="decision", component="sbt_plugin", action="walk",
                target=safe_url(artifact_root),
                outcome="exact_match" if exact else "all",
                count=len(search_versions)
            ))

        releases: List[str] = []
        for search_version in search_versions:
            scala_root = f"{artifact_root}/{prefix}{search_version}"
            sbt_dirs = self._links(scala_root)
            if sbt_dirs is None:
                continue
            for sbt_dir in sbt_dirs:
                leaves = self._links(f"{scala_root}/{sbt_dir}")
                if leaves:
                    releases.extend(leaves)

        if not releases:
            return []
        return self.sort_versions(releases)

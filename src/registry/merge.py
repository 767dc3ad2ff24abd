"""Combine per-registry lookups according to a registry strategy."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Union

from constants import RegistryStrategy
from versioning import maven_compare
from versioning.models import Release, ReleaseResult

logger = logging.getLogger(__name__)

RegistryLookup = Callable[[str, str], Optional[ReleaseResult]]


def merge_results(
    results: Sequence[ReleaseResult],
    sort_versions: Callable = maven_compare.sort_versions,
) -> Optional[ReleaseResult]:
    """Union the releases of ``results``; URLs come from the first result that has them."""
    if not results:
        return None
    merged = ReleaseResult(releases=[])
    versions: List[str] = []
    for res in results:
        versions.extend(res.versions)
        merged.dependency_url = merged.dependency_url or res.dependency_url
        merged.homepage = merged.homepage or res.homepage
        merged.source_url = merged.source_url or res.source_url
        merged.registry_url = merged.registry_url or res.registry_url
    merged.releases = [Release(version=v) for v in sort_versions(versions)]
    return merged


def get_releases_from_registries(
    lookup: RegistryLookup,
    package_name: str,
    registry_urls: Sequence[str],
    strategy: Union[RegistryStrategy, str] = RegistryStrategy.MERGE,
) -> Optional[ReleaseResult]:
    """Query ``registry_urls`` with ``lookup`` and compose the answers.

    Args:
        lookup: Single-registry lookup, e.g. ``SbtPluginResolver.get_releases``.
        package_name: sbt coordinates passed to ``lookup``.
        registry_urls: Registries in priority order.
        strategy: ``first`` asks only the first registry, ``hunt`` stops at the
            first registry with a result, ``merge`` asks all and unions releases.

    Returns:
        Composed ReleaseResult, or None when no registry had versions.
    """
    strategy = RegistryStrategy(strategy)
    urls = list(registry_urls)
    if strategy is RegistryStrategy.FIRST:
        urls = urls[:1]

    found: List[ReleaseResult] = []
    for registry_url in urls:
        res = lookup(package_name, registry_url)
        if res is None:
            continue
        if strategy is not RegistryStrategy.MERGE:
            return res
        found.append(res)

    if not found:
        logger.debug(
            "No versions found for %s in %s registries", package_name, len(urls)
        )
        return None
    return merge_results(found)

"""POM parsing for homepage and source repository discovery."""
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import ArtifactUrls

logger = logging.getLogger(__name__)

_SCM_REWRITES = (
    (re.compile(r"^scm:"), ""),
    (re.compile(r"^git:"), ""),
    (re.compile(r"^git@github\.com:"), "https://github.com/"),
    (re.compile(r"\.git$"), ""),
)


def _namespace(root: ET.Element) -> str:
    """Return the "{uri}" prefix of the root tag, or "" for un-namespaced POMs."""
    if root.tag.startswith("{"):
        return root.tag[: root.tag.index("}") + 1]
    return ""


def _child_text(parent: Optional[ET.Element], tag: str) -> Optional[str]:
    if parent is None:
        return None
    elem = parent.find(tag)
    if elem is None or not isinstance(elem.text, str):
        return None
    text = elem.text.strip()
    return text or None


def normalize_scm_url(url: str) -> str:
    """Turn an SCM url such as "scm:git:git@github.com:o/r.git" into a browsable URL.

    Args:
        url: Raw value of the POM's <scm><url>.

    Returns:
        Rewritten URL; unrecognized values pass through unchanged.
    """
    result = url.strip()
    for pattern, replacement in _SCM_REWRITES:
        result = pattern.sub(replacement, result)
    return result


def parse_pom_urls(pom_xml: str) -> ArtifactUrls:
    """Extract <url> and <scm><url> from POM XML.

    Parse errors are logged at DEBUG and yield empty ArtifactUrls.
    """
    try:
        root = ET.fromstring(pom_xml)
    except ET.ParseError:
        if is_debug_enabled(logger):
            logger.debug("POM parse error", extra=extra_context(
                event="anomaly", component="discovery", action="parse_pom",
                outcome="parse_error"
            ))
        return ArtifactUrls()

    ns = _namespace(root)
    homepage = _child_text(root, f"{ns}url")
    scm_url = _child_text(root.find(f"{ns}scm"), f"{ns}url")
    return ArtifactUrls(
        homepage=homepage,
        source_url=normalize_scm_url(scm_url) if scm_url else None,
    )

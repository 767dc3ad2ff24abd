"""HTML directory-listing helpers shared by the sbt scanners."""
from __future__ import annotations

import re
from typing import Callable, List, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

HrefFilterMap = Callable[[str], Optional[str]]

_DOTS_ONLY = re.compile(r"^\.+$")


def extract_page_links(content: str, filter_map: HrefFilterMap) -> List[str]:
    """Return anchor targets of ``content`` in document order.

    Args:
        content: HTML body of a directory listing.
        filter_map: Called with each raw href; returns the value to keep
            (possibly rewritten) or None to drop the link.

    Returns:
        Kept values, not deduplicated.
    """
    soup = BeautifulSoup(content, "html.parser")
    result: List[str] = []
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if not href:
            continue
        mapped = filter_map(href)
        if mapped:
            result.append(mapped)
    return result


def listing_name(href: str) -> str:
    """Directory or file name for a listing href ("1.0.0/" -> "1.0.0")."""
    return href.rstrip("/")


def skip_dot_links(href: str) -> Optional[str]:
    """Filter for parent/self links; keeps everything not starting with "."."""
    if href.startswith("."):
        return None
    return listing_name(href) or None


def directory_name(href: str) -> Optional[str]:
    """Filter keeping child directory links ("name/") that are not "." or ".."."""
    if not href.endswith("/"):
        return None
    name = listing_name(href)
    if not name or "/" in name or _DOTS_ONLY.match(name):
        return None
    return name


def relative_href(href: str, listing_url: str) -> str:
    """Make ``href`` relative to the listing it came from.

    Nexus and Artifactory render absolute links ("/repo/org/lib_2.13/") or
    full URLs; relative hrefs are returned unchanged.
    """
    base = listing_url.rstrip("/") + "/"
    if href.startswith(base):
        return href[len(base):]
    base_path = urlsplit(base).path
    if base_path != "/" and href.startswith(base_path):
        return href[len(base_path):]
    return href

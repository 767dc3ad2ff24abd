"""Generic sbt/Maven artifact layout support.

- util.py: directory-listing link extraction
- discovery.py: homepage and SCM URL extraction from POM files
- client.py: artifact subdirectory and release scanning
"""

from .client import SbtPackageScanner  # noqa: F401
from .discovery import normalize_scm_url, parse_pom_urls  # noqa: F401
from .util import extract_page_links  # noqa: F401

__all__ = [
    "SbtPackageScanner",
    "extract_page_links",
    "normalize_scm_url",
    "parse_pom_urls",
]

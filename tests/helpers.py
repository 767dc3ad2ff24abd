"""In-memory page fetcher and directory listing builders shared by the tests."""
from __future__ import annotations

from typing import Dict, List, Optional

from common.http_client import PageResponse


class FakeFetcher:
    """Serves pages from a dict and records every URL requested."""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages: Dict[str, str] = dict(pages or {})
        self.calls: List[str] = []

    def fetch(self, url: str, **kwargs) -> Optional[PageResponse]:
        self.calls.append(url)
        body = self.pages.get(url)
        if body is None:
            return None
        return PageResponse(url=url, status_code=200, body=body)


def listing(*names: str) -> str:
    """Render an Apache-style directory index containing ``names`` plus a parent link."""
    rows = ['<a href="../">../</a>']
    rows.extend(f'<a href="{name}" title="{name}">{name}</a>' for name in names)
    return "<html><body><pre>\n" + "\n".join(rows) + "\n</pre></body></html>"

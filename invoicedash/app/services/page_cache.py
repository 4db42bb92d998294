"""In-process cache of rendered dashboard pages, keyed by request path."""

import threading
from typing import Any, Dict, List, Optional, Protocol

INVOICES_PATH = "/dashboard/invoices"


class Revalidator(Protocol):
    def revalidate_path(self, path: str) -> None: ...


class PageCache:
    def __init__(self):
        self._pages: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._pages.get(path)

    def set(self, path: str, page: Any) -> None:
        with self._lock:
            self._pages[path] = page

    def revalidate_path(self, path: str) -> None:
        """Drop the cached page for path and every subpath below it."""
        prefix = path.rstrip("/") + "/"
        with self._lock:
            stale: List[str] = [key for key in self._pages if key == path or key.startswith(prefix)]
            for key in stale:
                del self._pages[key]

    def clear(self) -> None:
        with self._lock:
            self._pages.clear()


page_cache = PageCache()

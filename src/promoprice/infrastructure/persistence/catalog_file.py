"""Reading the catalog file shared by the JSON repositories.

The file mirrors the catalog service's product listing: a JSON array of
product objects, each embedding the platform campaigns that apply to it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_catalog(file_path: Path) -> list[dict[str, Any]]:
    if not file_path.exists():
        return []
    raw = json.loads(file_path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        # Paged responses wrap the listing as {"data": [...]}.
        raw = raw.get("data") or []
    return [item for item in raw if isinstance(item, dict) and "productId" in item]


def file_version(file_path: Path) -> str:
    if not file_path.exists():
        return "missing"
    stat = file_path.stat()
    return f"{stat.st_mtime_ns}-{stat.st_size}"

"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from pathlib import Path

from promoprice.domain.model.pricing import CartLine
from promoprice.domain.repository.cart_repository import CartRepository
from promoprice.infrastructure.payloads import objects, parse_cart_line


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartRepository interface ---------------------------------------------

    def list_lines(self) -> list[CartLine]:
        if not self._file_path.exists():
            return []
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        items = raw.get("items") if isinstance(raw, dict) else raw
        return [
            parse_cart_line(item)
            for item in objects(items, "items")
            if item.get("type", "PRODUCT") == "PRODUCT" and "cartItemId" in item
        ]

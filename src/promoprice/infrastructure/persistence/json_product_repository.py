"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from promoprice.domain.model.product import Product
from promoprice.domain.repository.product_repository import ProductRepository
from promoprice.infrastructure.payloads import parse_product
from promoprice.infrastructure.persistence.catalog_file import read_catalog


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for item in read_catalog(self._file_path):
            if str(item["productId"]) == product_id:
                return parse_product(item)
        return None

    def list_all(self) -> list[Product]:
        return [parse_product(item) for item in read_catalog(self._file_path)]

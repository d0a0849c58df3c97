"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from promoprice.infrastructure.persistence.json_campaign_repository import (
    JsonCampaignRepository,
)
from promoprice.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from promoprice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "PROMOPRICE_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    if override is not None:
        return override
    from_env = os.environ.get(DATA_DIR_ENV)
    return Path(from_env) if from_env else _DEFAULT_DATA_DIR


def product_repository(directory: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_dir(directory) / "catalog.json")


def campaign_repository(directory: Path | None = None) -> JsonCampaignRepository:
    return JsonCampaignRepository(data_dir(directory) / "catalog.json")


def cart_repository(directory: Path | None = None) -> JsonCartRepository:
    return JsonCartRepository(data_dir(directory) / "cart.json")

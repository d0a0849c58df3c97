"""JSON-file-backed implementation of CampaignRepository.

Campaigns are read from the same catalog file as products, where each
product embeds the platform campaigns that apply to it.
"""

from __future__ import annotations

from pathlib import Path

from promoprice.domain.model.campaign import Campaign
from promoprice.domain.repository.campaign_repository import CampaignRepository
from promoprice.infrastructure.payloads import product_campaigns
from promoprice.infrastructure.persistence.catalog_file import file_version, read_catalog


class JsonCampaignRepository(CampaignRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CampaignRepository interface -----------------------------------------

    def for_product(self, product_id: str) -> list[Campaign]:
        for item in read_catalog(self._file_path):
            if str(item["productId"]) == product_id:
                return product_campaigns(item)
        return []

    def version(self) -> str:
        return file_version(self._file_path)

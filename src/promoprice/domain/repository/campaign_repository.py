"""Abstract repository for promotional campaigns."""

from __future__ import annotations

from abc import ABC, abstractmethod

from promoprice.domain.model.campaign import Campaign


class CampaignRepository(ABC):

    @abstractmethod
    def for_product(self, product_id: str) -> list[Campaign]:
        """Return the campaigns applicable to a product, in backend order."""

    @abstractmethod
    def version(self) -> str:
        """Opaque token that changes whenever any campaign data changes."""

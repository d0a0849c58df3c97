"""Abstract repository for the shopper's cart lines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from promoprice.domain.model.pricing import CartLine


class CartRepository(ABC):

    @abstractmethod
    def list_lines(self) -> list[CartLine]:
        """Return every line of the current cart."""

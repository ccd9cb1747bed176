"""Application service: List Products use case (query).

Active products with their current price and on-hand quantity.
"""

from __future__ import annotations

from leathershop.application.dto import ProductDTO
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_repo: PriceRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._price_repo = price_repo
        self._stock_repo = stock_repo

    def handle(self) -> list[ProductDTO]:
        result = []
        for product in self._product_repo.list_active():
            price = self._price_repo.get_current(product.id)
            stock = self._stock_repo.get_active(product.id)
            result.append(
                ProductDTO(
                    id=product.id,
                    name=product.name,
                    category_id=product.category_id,
                    price=str(price.amount) if price is not None else None,
                    stock=stock.quantity if stock is not None else None,
                )
            )
        return result

"""Application service: Add Product use case.

Creates the product and, when given, its first price version and its
stock record in the same call.  Every input is validated before the
product is saved, so a rejected call leaves nothing behind.
"""

from __future__ import annotations

from leathershop.application.dto import ProductDTO
from leathershop.domain.exceptions import ConflictError, ValidationError
from leathershop.domain.model.identifiers import EntityType
from leathershop.domain.model.price import PriceRecord
from leathershop.domain.model.product import Product
from leathershop.domain.model.stock import require_non_negative
from leathershop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.price_version_store import PriceVersionStore
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_repo: PriceRepository,
        stock_repo: StockRepository,
        sequences: SequenceGenerator,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._price_repo = price_repo
        self._stock_repo = stock_repo
        self._sequences = sequences
        self._currency = currency

    def handle(
        self,
        name: str,
        category_id: str,
        description: str = "",
        material: str = "",
        color: str = "",
        price: str | None = None,
        initial_stock: int | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required", field="name")
        if not category_id or not category_id.strip():
            raise ValidationError("Product category is required", field="category_id")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ConflictError(
                f"Product '{name}' already exists", field="name", product_id=existing.id
            )

        if price is not None:
            PriceRecord.validate(Money.of(price, self._currency))
        if initial_stock is not None:
            require_non_negative(initial_stock, "quantity")

        product = Product.create(
            product_id=self._sequences.next_id(EntityType.PRODUCTS),
            name=name,
            category_id=category_id,
            description=description,
            material=material,
            color=color,
        )
        self._product_repo.save(product)

        price_str = None
        if price is not None:
            store = PriceVersionStore(self._price_repo, self._product_repo, self._sequences)
            record = store.set_current_price(product.id, price, currency=self._currency)
            price_str = str(record.amount)

        if initial_stock is not None:
            ledger = StockLedger(self._stock_repo, self._product_repo, self._sequences)
            ledger.create(product.id, initial_stock)

        return ProductDTO(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            price=price_str,
            stock=initial_stock,
        )

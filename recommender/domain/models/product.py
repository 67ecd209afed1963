from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    price: float = 0.0
    stock: int = 0
    rating: float = 0.0
    shipping_price: float = 0.0
    shipping_time: int = 0  # days

    # Request-scoped, set by the ranking engine on a copy; never serialized
    utility: Optional[float] = Field(default=None, exclude=True)

    model_config = {"frozen": True}  # immuable = safe

    @property
    def is_available(self) -> bool:
        return self.stock > 0

    @property
    def is_shipping_free(self) -> bool:
        return self.shipping_price == 0

    def with_utility(self, utility: float) -> "Product":
        return self.model_copy(update={"utility": utility})


class Query(BaseModel):
    """
    Structured query. Every filter is None when the caller did not specify it;
    wire sentinels (0 / false) are translated at the API boundary.
    """
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    free_shipping: bool = False
    max_shipping_time: Optional[int] = None
    available: bool = False
    min_rating: Optional[float] = None
    phrase: str = ""

    model_config = {"frozen": True}  # immuable = safe

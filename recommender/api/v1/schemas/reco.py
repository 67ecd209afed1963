# api/v1/schemas/reco.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional

from recommender.domain.models.product import Product, Query


class QueryIn(BaseModel):
    """
    Wire query. Numeric filters use 0 as "unspecified" and booleans use false;
    to_domain() turns those sentinels into None so the scorer never sees them.
    A consequence is that price_max=0 cannot be requested.
    """
    model_config = ConfigDict(populate_by_name=True)

    price_min: float = Field(0.0, validation_alias=AliasChoices("price_min", "priceMin"))
    price_max: float = Field(0.0, validation_alias=AliasChoices("price_max", "priceMax"))
    free_shipping: bool = Field(False, validation_alias=AliasChoices("free_shipping", "freeShipping", "freeShippingOnly"))
    max_shipping_time: int = Field(0, validation_alias=AliasChoices("max_shipping_time", "maxShippingTime"))
    available: bool = Field(False, validation_alias=AliasChoices("available", "availableOnly"))
    min_rating: float = Field(0.0, validation_alias=AliasChoices("min_rating", "minRating"))
    phrase: Optional[str] = ""

    def to_domain(self) -> Query:
        return Query(
            price_min=self.price_min if self.price_min > 0 else None,
            price_max=self.price_max if self.price_max > 0 else None,
            free_shipping=self.free_shipping,
            max_shipping_time=self.max_shipping_time if self.max_shipping_time > 0 else None,
            available=self.available,
            min_rating=self.min_rating if self.min_rating > 0 else None,
            phrase=self.phrase or "",
        )


class ProductIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    type: Optional[str] = None
    brand: Optional[str] = None
    price: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)
    description: Optional[str] = None
    rating: float = 0.0
    shipping_price: float = Field(0.0, ge=0, validation_alias=AliasChoices("shipping_price", "shippingPrice"))
    shipping_time: int = Field(0, ge=0, validation_alias=AliasChoices("shipping_time", "shippingTime"))

    def to_domain(self) -> Product:
        return Product(**self.model_dump())


class ProductOut(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    brand: Optional[str] = None
    price: float
    stock: int
    description: Optional[str] = None
    rating: float
    shipping_price: float
    shipping_time: int

    @classmethod
    def from_domain(cls, product: Product) -> "ProductOut":
        # utility is excluded from Product.model_dump()
        return cls(**product.model_dump())


class RcmRequest(BaseModel):
    query: QueryIn
    products: List[ProductIn] = Field(default_factory=list)


class ProductListOut(BaseModel):
    products: List[ProductOut]

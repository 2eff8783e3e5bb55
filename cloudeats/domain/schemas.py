# cloudeats/domain/schemas.py
import re
from datetime import datetime
from typing import Annotated, Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

#ids and quantities end up in BSON, which stores at most int64
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

Price = Union[
    Annotated[int, Field(ge=0, le=INT64_MAX)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]

# whole totals stay ints, "total": 20 rather than 20.0
Amount = Union[int, float]


class CamelModel(BaseModel):
    """Order-service payloads use camelCase on the wire, same as the cache and the orders collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----- cart -----

class CartItemIn(CamelModel):
    """Schema for adding an item to the cart."""

    item_id: Int64
    item_name: str
    price: Price = Field(..., description="Unit price (>= 0, finite)")
    # <= 0 is accepted here, only the quantity update treats it as removal
    quantity: Int64


class QuantityIn(CamelModel):
    quantity: Int64


class CartItemOut(CamelModel):
    item_id: int
    item_name: str
    price: Amount
    quantity: int


class CartOut(CamelModel):
    items: List[CartItemOut]
    total: Amount


class CartClearedOut(CartOut):
    message: str


# ----- orders -----

class OrderCreate(CamelModel):
    """Schema for placing an order from the user's cart."""

    user_id: Int64
    delivery_address: str
    notes: str | None = None
    payment_method: str | None = None


class OrderOut(CamelModel):
    id: str = Field(..., alias="_id")
    user_id: int
    items: List[CartItemOut]
    total_amount: Amount
    delivery_address: str
    notes: str = ""
    payment_method: str = "cash"
    status: str
    created_at: datetime
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_to_str(cls, value):
        return str(value)


class OrderPlacedOut(CamelModel):
    message: str
    order_id: str
    order: OrderOut

    @field_validator("order_id", mode="before")
    @classmethod
    def _object_id_to_str(cls, value):
        return str(value)


class StatusUpdate(CamelModel):
    status: str


class StatusUpdatedOut(CamelModel):
    message: str
    status: str


# ----- users -----

class UserCreate(BaseModel):
    """Schema for registering a user account."""

    email: str
    password: str = Field(..., min_length=6, description="At least 6 characters")
    full_name: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=20)

    @field_validator("email")
    @classmethod
    def _email_format(cls, value: str) -> str:
        if not EMAIL_RE.match(value):
            raise ValueError("Invalid email format")
        return value


class LoginIn(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    id: int
    email: str
    full_name: str
    phone: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserProfile(UserRead):
    created_at: datetime | None = None


class UserEnvelope(BaseModel):
    message: str
    user: UserRead


# ----- menu -----

class RatingIn(BaseModel):
    # checked by validate_rating, not by pydantic
    rating: Any = None


class RatingAccepted(CamelModel):
    message: str
    item_id: int
    rating: int


# ----- misc -----

class HealthOut(BaseModel):
    service: str
    status: str
    timestamp: datetime

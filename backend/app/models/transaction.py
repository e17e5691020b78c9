"""Transaction data models."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.utils.timestamp import parse_timestamp, to_utc


class TransactionCreate(BaseModel):
    """Transaction as received from the seed source.

    Fields the store does not keep (the source's own ``id``, ``image``) are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Fjallraven  Foldsack No 1 Backpack, Fits 15 Laptops",
                "description": "Your perfect pack for everyday use and walks in the forest.",
                "price": 329.85,
                "dateOfSale": "2021-11-27T20:29:54+05:30",
                "category": "men's clothing",
                "sold": False,
            }
        },
    )

    title: str = Field(default="", description="Product title")
    description: str = Field(default="", description="Product description")
    price: float = Field(..., description="Sale price")
    date_of_sale: datetime = Field(..., alias="dateOfSale", description="Date and time of sale")
    category: str = Field(default="", description="Free-text category")
    sold: bool = Field(default=False, description="Whether the item was sold")

    @field_validator("date_of_sale", mode="before")
    @classmethod
    def validate_date_of_sale(cls, v):
        """Accept ISO strings with or without offset and normalise to UTC."""
        if isinstance(v, str):
            try:
                v = parse_timestamp(v)
            except ValueError as e:
                raise ValueError(f"Invalid dateOfSale: {str(e)}")
        if isinstance(v, datetime):
            return to_utc(v)
        return v


class Transaction(TransactionCreate):
    """Stored transaction (id assigned by the store)."""

    id: Optional[str] = None

"""Wire models for receipt JSON payloads.

Only the shape is checked here: every field must be present and be a string.
Values such as ``total`` or ``purchaseDate`` are not pattern-checked; the
points rules decide how to score values that do not parse.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from receipt_points.domain.receipt import Receipt, ReceiptItem


class ItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(short_description=self.short_description, price=self.price)


class ReceiptPayload(BaseModel):
    """JSON body accepted by ``POST /receipts/process``."""

    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: list[ItemPayload]
    total: str

    def to_receipt(self) -> Receipt:
        """Convert to the domain model; item order is preserved."""
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(item.to_item() for item in self.items),
        )


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


def parse_receipt_json(raw: str | bytes) -> Receipt:
    """
    Decode a receipt JSON document into a Receipt.

    Raises:
        pydantic.ValidationError: If the document is not valid JSON or has the wrong shape.
    """
    return ReceiptPayload.model_validate_json(raw).to_receipt()

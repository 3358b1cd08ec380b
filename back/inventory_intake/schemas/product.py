# inventory_intake/schemas/product.py
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from inventory_intake.schemas.base import RequestModel
from inventory_intake.utils.text import is_blank, truncate

# Either empty or a host name (subdomains allowed) with an optional path.
IMAGE_URL_MAX_LENGTH = 500

IMAGE_URL_PATTERN = (
    r"^(https?://)?([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}(/.*)?$|^$"
)


class ProductRequest(RequestModel):
    """
    Product as the client submits it.
    Current stock is not part of it: stock only changes through movements.
    """

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=150)] = Field(
        ...,
        description="Commercial product name",
    )
    description: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]
    ] = Field(None, description="Detailed description")
    image_url: Optional[
        Annotated[
            str,
            StringConstraints(
                strip_whitespace=True,
                max_length=IMAGE_URL_MAX_LENGTH,
                pattern=IMAGE_URL_PATTERN,
            ),
        ]
    ] = Field(None, description="Product image URL, https:// is added when missing")
    price: Decimal = Field(
        ...,
        ge=Decimal("0.01"),
        le=Decimal("99999999.99"),
        description="Unit price, stored with exactly 2 fractional digits",
    )
    minimum_stock: Optional[int] = Field(
        None,
        ge=0,
        le=1_000_000,
        description="Stock level that triggers alerts, 0 when not given",
    )
    category_id: int = Field(..., gt=0, description="Reference to an existing category")

    def log_summary(self) -> str:
        return (
            f"ProductRequest{{name='{self.name}', price={self.price}, "
            f"categoryId={self.category_id}, minimumStock={self.minimum_stock}, "
            f"description='{truncate(self.description)}', "
            f"imageUrl='{truncate(self.image_url)}', "
            f"hasImage={not is_blank(self.image_url)}}}"
        )

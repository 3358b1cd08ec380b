# inventory_intake/services/product.py
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from inventory_intake.schemas.product import IMAGE_URL_MAX_LENGTH, ProductRequest
from inventory_intake.schemas.result import Rejected, RejectionKind
from inventory_intake.services.base import RequestValidator, semantic_inconsistency
from inventory_intake.services.vocabulary import (
    BRAND_EXCEPTIONS,
    IMAGE_EXTENSIONS,
)
from inventory_intake.utils.text import (
    blank_to_none,
    capitalize_first,
    capitalize_word,
    is_blank,
    split_words,
    upper_char,
)

CENT = Decimal("0.01")
MIN_REASONABLE_PRICE = Decimal("0.01")
MAX_REASONABLE_PRICE = Decimal("1000000.00")
PREMIUM_PRICE = Decimal("1000.00")
MAX_CONSISTENT_MINIMUM_STOCK = 10_000

NAME_PATTERN = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ0-9\s\-_.,()\"'/&%°]+$")
BARCODE_PATTERN = re.compile(r"^\d{8,}$")
IMAGE_PATTERN = re.compile(
    r"^https?://.*\.(" + "|".join(IMAGE_EXTENSIONS) + r").*$",
    re.IGNORECASE,
)

# (upper bound inclusive, tier); anything above the last bound is Premium
PRICE_TIERS = (
    (Decimal("50.00"), "Economic"),
    (Decimal("200.00"), "Intermediate"),
    (Decimal("1000.00"), "High"),
)


#
# Normalization
#
def capitalize_product_word(word: str) -> str:
    if word[:1].isdigit():
        # model numbers, capacities: "15", "256GB", "2x"
        return word
    lowered = word.lower()
    if lowered in BRAND_EXCEPTIONS:
        # iphone -> iPhone
        return "i" + upper_char(lowered[1]) + lowered[2:]
    # qualifiers (pro, max, mini, plus, air, ultra) and everything else
    return capitalize_word(lowered)


def capitalize_product_name(name: str) -> str:
    """ "iphone 15 pro max" -> "iPhone 15 Pro Max" """
    return " ".join(capitalize_product_word(w) for w in split_words(name))


def normalize_image_url(url: Optional[str]) -> Optional[str]:
    url = blank_to_none(url)
    if url is None:
        return None
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def round_price(price: Optional[Decimal]) -> Optional[Decimal]:
    if price is None:
        return None
    return Decimal(price).quantize(CENT, rounding=ROUND_HALF_UP)


def normalize(request: ProductRequest) -> ProductRequest:
    name = request.name
    if name is not None:
        name = capitalize_product_name(name.strip())

    description = blank_to_none(request.description)
    if description is not None:
        description = capitalize_first(description)

    minimum_stock = request.minimum_stock if request.minimum_stock is not None else 0

    return request.model_copy(
        update={
            "name": name,
            "description": description,
            "image_url": normalize_image_url(request.image_url),
            "minimum_stock": minimum_stock,
            "price": round_price(request.price),
        }
    )


#
# Predicates
#
def is_valid_name(request: ProductRequest) -> bool:
    if is_blank(request.name):
        return False
    return NAME_PATTERN.match(request.name.strip()) is not None


def is_reasonable_price(request: ProductRequest) -> bool:
    if request.price is None:
        return False
    return MIN_REASONABLE_PRICE <= request.price <= MAX_REASONABLE_PRICE


def is_premium(request: ProductRequest) -> bool:
    return request.price is not None and request.price > PREMIUM_PRICE


def has_description(request: ProductRequest) -> bool:
    return not is_blank(request.description)


def has_image(request: ProductRequest) -> bool:
    return not is_blank(request.image_url)


def has_minimum_stock(request: ProductRequest) -> bool:
    return request.minimum_stock is not None and request.minimum_stock > 0


def is_valid_image(request: ProductRequest) -> bool:
    """No image is fine; a present one must point to a known image type."""
    if not has_image(request):
        return True
    return IMAGE_PATTERN.match(request.image_url) is not None


def image_extension(request: ProductRequest) -> Optional[str]:
    if not has_image(request):
        return None
    url = request.image_url
    last_dot = url.rfind(".")
    if 0 < last_dot < len(url) - 1:
        return url[last_dot + 1:].lower()
    return None


def looks_like_barcode(request: ProductRequest) -> bool:
    if request.name is None:
        return False
    return BARCODE_PATTERN.match(request.name.strip()) is not None


def is_descriptive_name(request: ProductRequest) -> bool:
    if is_blank(request.name):
        return False
    return len(split_words(request.name)) >= 2


def price_tier(request: ProductRequest) -> str:
    if request.price is None:
        return "No price"
    for upper, tier in PRICE_TIERS:
        if request.price <= upper:
            return tier
    return "Premium"


def first_inconsistency(request: ProductRequest) -> Optional[Rejected]:
    if looks_like_barcode(request):
        return semantic_inconsistency(
            "looks_like_barcode", "Product name looks like a barcode", field="name"
        )
    if not is_reasonable_price(request):
        return semantic_inconsistency(
            "is_reasonable_price",
            f"Price must be between {MIN_REASONABLE_PRICE} and {MAX_REASONABLE_PRICE}",
            field="price",
        )
    if request.minimum_stock is not None and request.minimum_stock > MAX_CONSISTENT_MINIMUM_STOCK:
        return semantic_inconsistency(
            "minimum_stock_limit",
            f"Minimum stock above {MAX_CONSISTENT_MINIMUM_STOCK} is not plausible",
            field="minimumStock",
        )
    if request.image_url is not None and len(request.image_url) > IMAGE_URL_MAX_LENGTH:
        # the https:// prefix can push a scheme-less URL over the limit
        return Rejected(
            kind=RejectionKind.FORMAT_VIOLATION,
            predicate="image_url_length",
            field="imageUrl",
            message=f"Image URL must be at most {IMAGE_URL_MAX_LENGTH} characters",
        )
    if has_image(request) and not is_valid_image(request):
        return semantic_inconsistency(
            "is_valid_image",
            "Image URL must point to a jpg, jpeg, png, gif, webp or svg file",
            field="imageUrl",
        )
    return None


def is_consistent(request: ProductRequest) -> bool:
    return first_inconsistency(request) is None


class ProductValidator(RequestValidator[ProductRequest]):
    schema = ProductRequest
    entity = "product"

    def normalize(self, request: ProductRequest) -> ProductRequest:
        return normalize(request)

    def check(self, request: ProductRequest) -> Optional[Rejected]:
        return first_inconsistency(request)

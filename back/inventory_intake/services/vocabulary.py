# inventory_intake/services/vocabulary.py
"""
Read-only lookup tables shared by the normalizers.

Everything here is built once at import time and never mutated:
frozensets for membership checks, tuples where order matters.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

#
# Categories
#
CATEGORY_CONNECTORS = frozenset(
    {"y", "e", "o", "u", "de", "del", "la", "el", "en", "con", "para", "por"}
)

# bucket -> (keywords matched as substrings of the lowercased name, suggested description)
# Order matters: the first bucket that matches wins.
_CATEGORY_BUCKETS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    (
        "electronics",
        ("electrónic", "electronic", "tecnolog", "technology"),
        "Electronic devices, technology and gadgets",
    ),
    (
        "clothing",
        ("ropa", "clothing", "vestim", "apparel"),
        "Clothing and fashion accessories",
    ),
    (
        "home",
        ("hogar", "home", "casa", "house"),
        "Home goods and decoration",
    ),
    (
        "sports",
        ("deporte", "sports"),
        "Sports equipment and gear",
    ),
    (
        "books",
        ("libro", "books", "literatura"),
        "Books and reading material",
    ),
    (
        "food",
        ("aliment", "food", "comida"),
        "Food products and beverages",
    ),
    (
        "beauty",
        ("belleza", "beauty", "cosmét", "cosmetic"),
        "Beauty and personal care products",
    ),
    (
        "toys",
        ("juguet", "toys"),
        "Toys and children's entertainment",
    ),
    (
        "office",
        ("oficina", "office", "papeler", "stationery"),
        "Office supplies and stationery",
    ),
    (
        "health",
        ("salud", "health", "medicin", "medical"),
        "Health and medical products",
    ),
)

CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {bucket: keywords for bucket, keywords, _ in _CATEGORY_BUCKETS}
)
CATEGORY_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {bucket: description for bucket, _, description in _CATEGORY_BUCKETS}
)
CATEGORY_BUCKET_ORDER: Tuple[str, ...] = tuple(bucket for bucket, _, _ in _CATEGORY_BUCKETS)

#
# Products
#
BRAND_EXCEPTIONS = frozenset({"iphone", "ipad", "imac"})
IMAGE_EXTENSIONS: Tuple[str, ...] = ("jpg", "jpeg", "png", "gif", "webp", "svg")

#
# Users
#
RESERVED_USERNAMES = frozenset(
    {"admin", "root", "system", "user", "test", "null", "undefined"}
)

#
# Movements
#
# "confirming" phrases make a reason coherent for its own direction,
# "indicator" words are what contradicts the opposite direction.
ENTRY_CONFIRMING: Tuple[str, ...] = (
    "entrada", "compra", "recepción", "reposición", "devolución", "ajuste positivo",
    "entry", "purchase", "receipt", "replenishment", "return", "positive adjustment",
)
ENTRY_INDICATORS: Tuple[str, ...] = (
    "entrada", "compra", "recepción", "reposición", "devolución", "positivo",
    "entry", "purchase", "receipt", "replenishment", "return", "positive",
)
EXIT_CONFIRMING: Tuple[str, ...] = (
    "salida", "venta", "entrega", "consumo", "merma", "ajuste negativo",
    "exit", "sale", "delivery", "consumption", "shrinkage", "negative adjustment",
)
EXIT_INDICATORS: Tuple[str, ...] = (
    "salida", "venta", "entrega", "consumo", "merma", "negativo",
    "exit", "sale", "delivery", "consumption", "shrinkage", "negative",
)

DEFAULT_ENTRY_REASON = "Entry of inventory"
DEFAULT_EXIT_REASON = "Exit of inventory"
DEFAULT_MOVEMENT_REASON = "Inventory movement"

DEFAULT_REASONS = frozenset(
    {
        "entry of inventory",
        "exit of inventory",
        "entry of goods",
        "exit of goods",
        "entrada de inventario",
        "salida de inventario",
        "entrada de mercancía",
        "salida de mercancía",
    }
)

ENTRY_REASON_SUGGESTIONS: Tuple[str, ...] = (
    "Purchase of goods",
    "Stock replenishment",
    "Customer return",
    "Positive inventory adjustment",
    "Receipt from supplier",
    "Transfer from another branch",
)
EXIT_REASON_SUGGESTIONS: Tuple[str, ...] = (
    "Sale to customer",
    "Home delivery",
    "Internal consumption",
    "Shrinkage due to expiration",
    "Negative inventory adjustment",
    "Transfer to another branch",
    "Damaged product",
)

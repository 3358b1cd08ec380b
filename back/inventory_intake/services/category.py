# inventory_intake/services/category.py
from __future__ import annotations

import re
from typing import Optional

from inventory_intake.schemas.category import CategoryRequest
from inventory_intake.schemas.result import Rejected, RejectionKind
from inventory_intake.services.base import RequestValidator
from inventory_intake.services.vocabulary import (
    CATEGORY_BUCKET_ORDER,
    CATEGORY_CONNECTORS,
    CATEGORY_DESCRIPTIONS,
    CATEGORY_KEYWORDS,
)
from inventory_intake.utils.text import (
    blank_to_none,
    capitalize_first,
    capitalize_word,
    contains_any,
    is_blank,
    split_words,
)

NAME_PATTERN = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ0-9\s\-_&().]+$", re.IGNORECASE)
LETTERS_ONLY_PATTERN = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+$", re.IGNORECASE)


def capitalize_category_name(name: str) -> str:
    """
    "electrónicos y gadgets" -> "Electrónicos y Gadgets"
    Connectors stay lowercase except in first position.
    """
    words = []
    for i, word in enumerate(split_words(name)):
        lowered = word.lower()
        if i > 0 and lowered in CATEGORY_CONNECTORS:
            words.append(lowered)
        else:
            words.append(capitalize_word(lowered))
    return " ".join(words)


def normalize(request: CategoryRequest) -> CategoryRequest:
    name = request.name
    if name is not None:
        name = capitalize_category_name(name.strip())

    description = blank_to_none(request.description)
    if description is not None:
        description = capitalize_first(description)

    return request.model_copy(update={"name": name, "description": description})


def is_valid_name(request: CategoryRequest) -> bool:
    if is_blank(request.name):
        return False
    return NAME_PATTERN.match(request.name.strip()) is not None


def is_letters_only(request: CategoryRequest) -> bool:
    if is_blank(request.name):
        return False
    return LETTERS_ONLY_PATTERN.match(request.name.strip()) is not None


def has_description(request: CategoryRequest) -> bool:
    return not is_blank(request.description)


def common_bucket(request: CategoryRequest) -> Optional[str]:
    """Vocabulary bucket the name falls into (electronics, food, ...), if any."""
    if request.name is None:
        return None
    lowered = request.name.lower()
    for bucket in CATEGORY_BUCKET_ORDER:
        if contains_any(lowered, CATEGORY_KEYWORDS[bucket]):
            return bucket
    return None


def is_common_category(request: CategoryRequest) -> bool:
    return common_bucket(request) is not None


def suggested_description(request: CategoryRequest) -> str:
    bucket = common_bucket(request)
    if bucket is not None:
        return CATEGORY_DESCRIPTIONS[bucket]
    if request.name is None:
        return ""
    return f"Product category {request.name.lower()}"


class CategoryValidator(RequestValidator[CategoryRequest]):
    schema = CategoryRequest
    entity = "category"

    def normalize(self, request: CategoryRequest) -> CategoryRequest:
        return normalize(request)

    def check(self, request: CategoryRequest) -> Optional[Rejected]:
        if not is_valid_name(request):
            return Rejected(
                kind=RejectionKind.FORMAT_VIOLATION,
                predicate="is_valid_name",
                field="name",
                message=(
                    "Category name may only contain letters, digits, spaces "
                    "and - _ & ( ) ."
                ),
            )
        return None

from decimal import Decimal

import pytest

from inventory_intake.schemas.product import ProductRequest
from inventory_intake.schemas.result import Accepted, Rejected, RejectionKind
from inventory_intake.services import product
from inventory_intake.services.product import ProductValidator


def make_product(**overrides):
    data = {
        "name": "Mouse Inalámbrico",
        "price": Decimal("25.50"),
        "category_id": 1,
    }
    data.update(overrides)
    return ProductRequest(**data)


@pytest.fixture
def validator():
    return ProductValidator()


def test_brand_and_qualifier_capitalization():
    req = product.normalize(make_product(name="iphone 15 pro max"))
    assert req.name == "iPhone 15 Pro Max"


@pytest.mark.parametrize("raw,expected", [
    ("IPAD air 256GB", "iPad Air 256GB"),
    ("imac   ULTRA", "iMac Ultra"),
    ("samsung galaxy s24 plus", "Samsung Galaxy S24 Plus"),
    ("cable usb 2m", "Cable Usb 2m"),
    ("mini LAPTOP", "Mini Laptop"),
])
def test_product_name_rules(raw, expected):
    assert product.capitalize_product_name(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    ("19.995", Decimal("20.00")),
    ("19.994", Decimal("19.99")),
    ("10", Decimal("10.00")),
    ("2.345", Decimal("2.35")),
])
def test_price_rounds_half_up(raw, expected):
    req = product.normalize(make_product(price=Decimal(raw)))
    assert req.price == expected
    assert str(req.price) == str(expected)


def test_normalize_image_url_adds_scheme():
    req = product.normalize(make_product(image_url="cdn.example.com/a.png"))
    assert req.image_url == "https://cdn.example.com/a.png"

    req = product.normalize(make_product(image_url="http://cdn.example.com/a.png"))
    assert req.image_url == "http://cdn.example.com/a.png"

    req = product.normalize(make_product(image_url=""))
    assert req.image_url is None


def test_normalize_defaults_and_description():
    req = product.normalize(make_product(description="  teclado mecánico  "))
    assert req.minimum_stock == 0
    assert req.description == "Teclado mecánico"

    req = product.normalize(make_product(description=" "))
    assert req.description is None


def test_normalize_is_idempotent():
    once = product.normalize(
        make_product(
            name="ipad PRO 11",
            description="tablet",
            image_url="www.example.com/x.webp",
            price=Decimal("799.999"),
        )
    )
    assert product.normalize(once) == once


@pytest.mark.parametrize("name,expected", [
    ("ßig deal", "ßig Deal"),
    ("ﬁlter pro", "ﬁlter Pro"),
])
def test_normalize_keeps_expanding_first_letter(name, expected):
    """A first letter whose upper case is two letters stays as given"""
    once = product.normalize(make_product(name=name))
    assert once.name == expected
    assert product.normalize(once) == once


@pytest.mark.parametrize("price,expected", [
    (Decimal("0.01"), True),
    (Decimal("1000000.00"), True),
    (Decimal("1000000.01"), False),
    (Decimal("0.00"), False),
])
def test_is_reasonable_price(price, expected):
    req = ProductRequest.model_construct(name="X", price=price, category_id=1)
    assert product.is_reasonable_price(req) is expected


def test_is_reasonable_price_without_price():
    req = ProductRequest.model_construct(name="X", price=None, category_id=1)
    assert not product.is_reasonable_price(req)
    assert product.price_tier(req) == "No price"
    assert not product.is_premium(req)


@pytest.mark.parametrize("price,tier", [
    ("50.00", "Economic"),
    ("50.01", "Intermediate"),
    ("200.00", "Intermediate"),
    ("999.99", "High"),
    ("1000.00", "High"),
    ("1000.01", "Premium"),
])
def test_price_tier(price, tier):
    assert product.price_tier(make_product(price=Decimal(price))) == tier


def test_is_premium():
    assert product.is_premium(make_product(price=Decimal("1000.01")))
    assert not product.is_premium(make_product(price=Decimal("1000.00")))


@pytest.mark.parametrize("url,expected", [
    (None, True),
    ("https://cdn.example.com/p/phone.PNG", True),
    ("http://cdn.example.com/p/phone.jpeg?size=large", True),
    ("https://cdn.example.com/p/logo.svg", True),
    ("https://cdn.example.com/p/phone", False),
    ("cdn.example.com/p/phone.png", False),
])
def test_is_valid_image(url, expected):
    req = ProductRequest.model_construct(name="X", price=Decimal("1"), category_id=1, image_url=url)
    assert product.is_valid_image(req) is expected


def test_image_extension():
    assert product.image_extension(make_product(image_url="https://example.com/a/b.JPG")) == "jpg"
    assert product.image_extension(make_product()) is None


@pytest.mark.parametrize("name,expected", [
    ("12345678", True),
    ("7501234567890", True),
    ("1234567", False),
    ("Coca Cola 600", False),
])
def test_looks_like_barcode(name, expected):
    assert product.looks_like_barcode(make_product(name=name)) is expected


def test_descriptive_name_and_flags():
    req = product.normalize(make_product(name="Monitor", minimum_stock=5))
    assert not product.is_descriptive_name(req)
    assert product.has_minimum_stock(req)
    assert not product.has_image(req)
    assert not product.has_description(req)
    assert product.is_valid_name(req)


def test_is_valid_name_rejects_symbols():
    assert not product.is_valid_name(make_product(name="Cable <USB>"))
    assert product.is_valid_name(make_product(name='Tubo 1/2" 90°'))


def test_barcode_name_is_never_consistent():
    """Everything else valid, still rejected"""
    req = product.normalize(
        make_product(
            name="75012345678",
            image_url="https://cdn.example.com/a.png",
            minimum_stock=10,
        )
    )
    assert not product.is_consistent(req)


def test_is_consistent_conditions():
    assert product.is_consistent(product.normalize(make_product()))
    assert not product.is_consistent(make_product(minimum_stock=10_001))
    assert not product.is_consistent(make_product(price=Decimal("1000000.50")))
    assert not product.is_consistent(make_product(image_url="https://cdn.example.com/file"))


def test_validator_accepts(validator):
    result = validator.validate({
        "name": "iphone 15 pro max",
        "price": "1299.995",
        "imageUrl": "cdn.example.com/img/iphone.png",
        "categoryId": 3,
    })
    assert isinstance(result, Accepted)
    assert result.record.name == "iPhone 15 Pro Max"
    assert result.record.price == Decimal("1300.00")
    assert result.record.image_url == "https://cdn.example.com/img/iphone.png"
    assert result.record.minimum_stock == 0


def test_validator_semantic_rejection(validator):
    result = validator.validate({"name": "12345678901", "price": "10", "categoryId": 1})
    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.SEMANTIC_INCONSISTENCY
    assert result.predicate == "looks_like_barcode"


def test_validator_rejects_image_url_too_long_after_scheme(validator):
    url = "cdn.example.com/" + "a" * 476 + ".png"
    assert len(url) <= 500

    result = validator.validate({"name": "Teclado", "price": "10", "categoryId": 1, "imageUrl": url})
    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.FORMAT_VIOLATION
    assert result.predicate == "image_url_length"
    assert result.field == "imageUrl"


def test_validator_accepts_image_url_at_limit_after_scheme(validator):
    url = "cdn.example.com/" + "a" * 472 + ".png"
    result = validator.validate({"name": "Teclado", "price": "10", "categoryId": 1, "imageUrl": url})
    assert isinstance(result, Accepted)
    assert len(result.record.image_url) == 500
    # the canonical record passes its own schema again
    assert validator.validate(result.record.model_dump(by_alias=True)).accepted


def test_validator_format_rejection_missing_category(validator):
    result = validator.validate({"name": "Teclado", "price": "10"})
    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.FORMAT_VIOLATION
    assert result.field == "categoryId"


@pytest.mark.parametrize("payload", [
    {"name": "Teclado", "price": "0", "categoryId": 1},
    {"name": "Teclado", "price": "100000000", "categoryId": 1},
    {"name": "Teclado", "price": "10", "categoryId": 0},
    {"name": "Teclado", "price": "10", "categoryId": 1, "minimumStock": -1},
    {"name": "Teclado", "price": "10", "categoryId": 1, "imageUrl": "not a url"},
])
def test_validator_format_rejections(validator, payload):
    result = validator.validate(payload)
    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.FORMAT_VIOLATION


def test_log_summary_has_no_full_long_fields():
    req = make_product(description="x" * 300, image_url="https://cdn.example.com/" + "p" * 100 + ".png")
    summary = req.log_summary()
    assert "x" * 51 not in summary
    assert "hasImage=True" in summary

"""Tests for product and debt form validation."""

import pytest

from stockbook.core.entities import Product
from stockbook.core.services.form_validation import (
    FIELD_REQUIRED,
    INVALID_AMOUNT,
    INVALID_PRICE,
    INVALID_QUANTITY,
    PRODUCT_NAME_EXISTS,
    validate_debt_form,
    validate_product_form,
)


@pytest.fixture
def catalog():
    return [Product(id="p1", name="Apple", quantity=5, purchase_price=10.0, sale_price=15.0)]


class TestValidateProductForm:
    """Tests for validate_product_form."""

    def test_valid_form(self, catalog):
        result = validate_product_form("Pear", "20", "2", "3.5", catalog)

        assert result.is_valid
        assert result.issues == {}
        assert result.draft.name == "Pear"
        assert result.draft.quantity == 20
        assert result.draft.sale_price == 3.5

    def test_persian_digits_and_separators(self, catalog):
        result = validate_product_form("Rice", "۱۲", "1,200", "۱۵۰۰", catalog)
        assert result.draft.quantity == 12
        assert result.draft.purchase_price == 1200.0
        assert result.draft.sale_price == 1500.0

    def test_required_fields(self, catalog):
        result = validate_product_form(" ", "", "", "", catalog)

        assert not result.is_valid
        assert result.issues == {
            "name": FIELD_REQUIRED,
            "quantity": FIELD_REQUIRED,
            "purchase_price": FIELD_REQUIRED,
            "sale_price": FIELD_REQUIRED,
        }

    def test_duplicate_name(self, catalog):
        result = validate_product_form(" apple ", "1", "1", "2", catalog)
        assert result.issues == {"name": PRODUCT_NAME_EXISTS}

    def test_editing_keeps_own_name(self, catalog):
        result = validate_product_form("Apple", "1", "1", "2", catalog, editing_id="p1")
        assert result.is_valid

    def test_invalid_numbers(self, catalog):
        result = validate_product_form("Pear", "-2", "0", "abc", catalog)
        assert result.issues == {
            "quantity": INVALID_QUANTITY,
            "purchase_price": INVALID_PRICE,
            "sale_price": INVALID_PRICE,
        }

    def test_price_below_cost_blocks_save(self, catalog):
        result = validate_product_form("Pear", "1", "5", "4", catalog)

        assert result.price_below_cost
        assert result.issues == {}
        assert not result.is_valid


class TestValidateDebtForm:
    """Tests for validate_debt_form."""

    def test_valid_form(self):
        result = validate_debt_form("Sara", "Karimi", "Rice", "450,000", "", "soon")

        assert result.is_valid
        assert result.draft.amount == 450000.0
        assert result.draft.contact_number is None
        assert result.draft.note == "soon"

    def test_required_fields(self):
        result = validate_debt_form("", " ", "", "10")
        assert result.issues == {
            "first_name": FIELD_REQUIRED,
            "last_name": FIELD_REQUIRED,
            "items_description": FIELD_REQUIRED,
        }

    def test_empty_amount_is_zero(self):
        assert validate_debt_form("Ali", "Rezaei", "Bread", "").draft.amount == 0.0

    def test_negative_amount(self):
        result = validate_debt_form("Ali", "Rezaei", "Bread", "-5")
        assert result.issues == {"amount": INVALID_AMOUNT}

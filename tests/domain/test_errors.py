"""Tests for domain error classes."""

from cta_market.domain.errors import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    InvalidTransitionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    field_error,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}
        assert str(error) == "Something went wrong"

    def test_to_dict_includes_context(self) -> None:
        error = DomainError("Test error", offer_id="abc")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "offer_id": "abc",
        }


class TestValidationError:
    """Tests for ValidationError class."""

    def test_default_message_without_field_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert "errors" not in error.to_dict()

    def test_field_errors_change_default_message(self) -> None:
        errors = [field_error("price", "Must be >= 0", "OUT_OF_RANGE")]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "price", "message": "Must be >= 0", "code": "OUT_OF_RANGE"}],
        }

    def test_empty_error_list_is_treated_as_none(self) -> None:
        assert ValidationError(errors=[]).errors is None


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Offer", "123")

        assert error.message == "Offer with identifier '123' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Offer", "identifier": "123"}

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Buyer").message == "Buyer not found"


class TestInvalidTransitionError:
    def test_is_a_conflict_with_its_own_code(self) -> None:
        error = InvalidTransitionError(current="DELIVERED", target="PENDING", purchase_id="p1")

        assert isinstance(error, ConflictError)
        assert error.error_code == "INVALID_TRANSITION"
        assert error.message == "Cannot change purchase status from DELIVERED to PENDING"
        assert error.context == {"current": "DELIVERED", "target": "PENDING", "purchase_id": "p1"}


def test_error_codes_are_stable() -> None:
    assert ConflictError("x").error_code == "CONFLICT"
    assert UnauthorizedError("x").error_code == "UNAUTHORIZED"
    assert ForbiddenError("x").error_code == "FORBIDDEN"
    assert InternalError("x").error_code == "INTERNAL_ERROR"


def test_all_errors_inherit_from_domain_error() -> None:
    for cls in (ValidationError, NotFoundError, ConflictError, UnauthorizedError, ForbiddenError):
        assert issubclass(cls, DomainError)


def test_field_error_defaults_code() -> None:
    assert field_error("year", "Bad year") == {
        "field": "year",
        "message": "Bad year",
        "code": "INVALID_VALUE",
    }

"""Record domain service: validated writes of raw farm records."""

from typing import Optional
from datetime import date
from decimal import Decimal

from farmstats.database.base import Database
from farmstats.domain.entities import (
    Flock,
    PaymentMethod,
    Transaction,
    TransactionKind,
)
from farmstats.domain.errors import (
    NotFoundError,
    ValidationError,
    flock_not_found,
    score_out_of_range,
    transaction_not_found,
)


def _require_farm(farm_id: str) -> None:
    if not farm_id or not farm_id.strip():
        raise ValidationError("Farm ID is required")


def _normalize_currency(currency: str) -> str:
    code = (currency or "").strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise ValidationError(f"Invalid currency code '{currency}'")
    return code


def _check_score(name: str, value: float) -> None:
    if not 0 <= value <= 100:
        raise ValidationError(score_out_of_range(name, value))


class RecordService:
    """Service for writing transactions, egg records and flocks."""

    def __init__(self, db: Database):
        """Initialize record service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        farm_id: str,
        kind: TransactionKind,
        amount: Decimal,
        occurred_on: date,
        category: str = "General",
        currency: str = "UGX",
    ) -> int:
        """Create an income or expense transaction.

        Args:
            farm_id: Farm the transaction belongs to
            kind: Income or expense
            amount: Non-negative amount in the farm's reporting currency
            occurred_on: Date the money moved
            category: Free-form category name
            currency: ISO 4217 currency code

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is negative or the currency is malformed
        """
        _require_farm(farm_id)
        if amount < 0:
            raise ValidationError(f"Amount must not be negative, got {amount}")

        return self.db.create_transaction(
            farm_id=farm_id,
            kind=TransactionKind(kind),
            category=category,
            amount=amount,
            currency=_normalize_currency(currency),
            occurred_on=occurred_on,
        )

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        occurred_on: Optional[date] = None,
        category: Optional[str] = None,
    ) -> None:
        """Update an existing transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If the new amount is negative
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        if amount is not None and amount < 0:
            raise ValidationError(f"Amount must not be negative, got {amount}")

        self.db.update_transaction(
            transaction_id, amount=amount, occurred_on=occurred_on, category=category
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)

    def record_egg_collection(
        self,
        farm_id: str,
        date: date,
        eggs_collected: int,
        hen_count: int,
        house: Optional[str] = None,
    ) -> int:
        """Record eggs collected from one house on one day."""
        _require_farm(farm_id)
        if eggs_collected < 0:
            raise ValidationError("Eggs collected must not be negative")
        if hen_count < 0:
            raise ValidationError("Hen count must not be negative")

        return self.db.create_egg_collection(
            farm_id=farm_id,
            date=date,
            eggs_collected=eggs_collected,
            hen_count=hen_count,
            house=house,
        )

    def record_egg_sale(
        self,
        farm_id: str,
        date: date,
        quantity: int,
        price: Decimal,
        customer: str,
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> int:
        """Record an egg sale; ``price`` is per egg."""
        _require_farm(farm_id)
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")
        if price < 0:
            raise ValidationError("Price must not be negative")
        if not customer or not customer.strip():
            raise ValidationError("Customer is required")

        return self.db.create_egg_sale(
            farm_id=farm_id,
            date=date,
            quantity=quantity,
            price=price,
            customer=customer.strip(),
            payment_method=PaymentMethod(payment_method),
        )

    def create_flock(
        self,
        farm_id: str,
        name: str,
        health_score: float,
        productivity_score: float,
        feed_efficiency_score: float,
    ) -> int:
        """Create a flock with scores between 0 and 100."""
        _require_farm(farm_id)
        if not name or not name.strip():
            raise ValidationError("Flock name is required")
        _check_score("Health score", health_score)
        _check_score("Productivity score", productivity_score)
        _check_score("Feed efficiency score", feed_efficiency_score)

        return self.db.create_flock(
            farm_id=farm_id,
            name=name.strip(),
            health_score=health_score,
            productivity_score=productivity_score,
            feed_efficiency_score=feed_efficiency_score,
        )

    def update_flock_scores(
        self,
        flock_id: int,
        health_score: Optional[float] = None,
        productivity_score: Optional[float] = None,
        feed_efficiency_score: Optional[float] = None,
    ) -> None:
        """Update some or all of a flock's scores."""
        if self.db.get_flock(flock_id) is None:
            raise NotFoundError(flock_not_found(flock_id))
        for name, value in (
            ("Health score", health_score),
            ("Productivity score", productivity_score),
            ("Feed efficiency score", feed_efficiency_score),
        ):
            if value is not None:
                _check_score(name, value)

        self.db.update_flock_scores(
            flock_id,
            health_score=health_score,
            productivity_score=productivity_score,
            feed_efficiency_score=feed_efficiency_score,
        )

    def list_flocks(self, farm_id: str) -> list[Flock]:
        """List a farm's flocks."""
        return self.db.list_flocks(farm_id)

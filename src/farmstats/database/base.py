"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Callable, Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from farmstats.domain.entities import (
    EggCollectionEvent,
    EggSale,
    Flock,
    PaymentMethod,
    Transaction,
    TransactionKind,
)

ChangeListener = Callable[[str], None]


class Database(ABC):
    """Abstract database interface for farmstats.

    Read operations raise UpstreamUnavailable when the underlying store
    cannot be reached. Every committed write notifies the registered change
    listeners with the farm ID it touched.
    """

    def __init__(self) -> None:
        self._change_listeners: list[ChangeListener] = []

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Register a callback invoked with a farm ID after each write.

        Registering the same callback again has no effect.
        """
        if listener not in self._change_listeners:
            self._change_listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        """Unregister a previously added callback."""
        self._change_listeners.remove(listener)

    def _notify_change(self, farm_id: str) -> None:
        for listener in list(self._change_listeners):
            listener(farm_id)

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        farm_id: str,
        kind: TransactionKind,
        category: str,
        amount: Decimal,
        currency: str,
        occurred_on: date,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        kind: Optional[TransactionKind] = None,
        category: Optional[str] = None,
        amount: Optional[Decimal] = None,
        currency: Optional[str] = None,
        occurred_on: Optional[date] = None,
    ) -> None:
        """Update transaction fields."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        farm_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List a farm's transactions, optionally within a date range (inclusive)."""
        pass

    # Egg collection operations
    @abstractmethod
    def create_egg_collection(
        self,
        farm_id: str,
        date: date,
        eggs_collected: int,
        hen_count: int,
        house: Optional[str] = None,
    ) -> int:
        """Record an egg collection event. Returns event ID."""
        pass

    @abstractmethod
    def delete_egg_collection(self, event_id: int) -> None:
        """Delete an egg collection event."""
        pass

    @abstractmethod
    def list_egg_collections(
        self,
        farm_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[EggCollectionEvent]:
        """List a farm's egg collection events."""
        pass

    # Egg sale operations
    @abstractmethod
    def create_egg_sale(
        self,
        farm_id: str,
        date: date,
        quantity: int,
        price: Decimal,
        customer: str,
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> int:
        """Record an egg sale. Returns sale ID."""
        pass

    @abstractmethod
    def list_egg_sales(
        self,
        farm_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[EggSale]:
        """List a farm's egg sales."""
        pass

    # Flock operations
    @abstractmethod
    def create_flock(
        self,
        farm_id: str,
        name: str,
        health_score: float,
        productivity_score: float,
        feed_efficiency_score: float,
    ) -> int:
        """Create a flock. Returns flock ID."""
        pass

    @abstractmethod
    def get_flock(self, flock_id: int) -> Optional[Flock]:
        """Get flock by ID."""
        pass

    @abstractmethod
    def update_flock_scores(
        self,
        flock_id: int,
        health_score: Optional[float] = None,
        productivity_score: Optional[float] = None,
        feed_efficiency_score: Optional[float] = None,
    ) -> None:
        """Update a flock's raw scores."""
        pass

    @abstractmethod
    def delete_flock(self, flock_id: int) -> None:
        """Delete a flock."""
        pass

    @abstractmethod
    def list_flocks(self, farm_id: str) -> list[Flock]:
        """List a farm's flocks ordered by name."""
        pass

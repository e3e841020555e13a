"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic, so the aggregation engine never
depends on the database schema.
"""

from farmstats.domain import entities as domain
from farmstats.database.models import (
    Transaction as ORMTransaction,
    EggCollection as ORMEggCollection,
    EggSale as ORMEggSale,
    Flock as ORMFlock,
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        farm_id=orm_transaction.farm_id,
        kind=domain.TransactionKind(orm_transaction.kind),
        category=orm_transaction.category,
        amount=orm_transaction.amount,
        currency=orm_transaction.currency,
        occurred_on=orm_transaction.occurred_on,
        created_at=orm_transaction.created_at,
    )


def egg_collection_to_domain(orm_event: ORMEggCollection) -> domain.EggCollectionEvent:
    """Convert SQLAlchemy EggCollection model to domain EggCollectionEvent entity."""
    return domain.EggCollectionEvent(
        id=orm_event.id,
        farm_id=orm_event.farm_id,
        date=orm_event.date,
        eggs_collected=orm_event.eggs_collected,
        hen_count=orm_event.hen_count,
        house=orm_event.house,
        created_at=orm_event.created_at,
    )


def egg_sale_to_domain(orm_sale: ORMEggSale) -> domain.EggSale:
    """Convert SQLAlchemy EggSale model to domain EggSale entity."""
    return domain.EggSale(
        id=orm_sale.id,
        farm_id=orm_sale.farm_id,
        date=orm_sale.date,
        quantity=orm_sale.quantity,
        price=orm_sale.price,
        customer=orm_sale.customer,
        payment_method=domain.PaymentMethod(orm_sale.payment_method),
        created_at=orm_sale.created_at,
    )


def flock_to_domain(orm_flock: ORMFlock) -> domain.Flock:
    """Convert SQLAlchemy Flock model to domain Flock entity."""
    return domain.Flock(
        id=orm_flock.id,
        farm_id=orm_flock.farm_id,
        name=orm_flock.name,
        health_score=orm_flock.health_score,
        productivity_score=orm_flock.productivity_score,
        feed_efficiency_score=orm_flock.feed_efficiency_score,
    )

"""SQLAlchemy models for farmstats database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    Float,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Income or expense transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    farm_id = Column(String, nullable=False)
    kind = Column(String(16), nullable=False)
    category = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    occurred_on = Column(Date, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_transactions_farm_date", "farm_id", "occurred_on"),)


class EggCollection(Base):
    """Egg collection event model."""

    __tablename__ = "egg_collections"

    id = Column(Integer, primary_key=True)
    farm_id = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    eggs_collected = Column(Integer, nullable=False)
    hen_count = Column(Integer, nullable=False)
    house = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Not unique: one collection per house per day
    __table_args__ = (Index("ix_egg_collections_farm_date", "farm_id", "date"),)


class EggSale(Base):
    """Egg sale model."""

    __tablename__ = "egg_sales"

    id = Column(Integer, primary_key=True)
    farm_id = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(14, 2), nullable=False)
    customer = Column(String, nullable=False)
    payment_method = Column(String(16), nullable=False, default="cash")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_egg_sales_farm_date", "farm_id", "date"),)


class Flock(Base):
    """Flock model with its raw scores."""

    __tablename__ = "flocks"

    id = Column(Integer, primary_key=True)
    farm_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    health_score = Column(Float, nullable=False, default=0.0)
    productivity_score = Column(Float, nullable=False, default=0.0)
    feed_efficiency_score = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)

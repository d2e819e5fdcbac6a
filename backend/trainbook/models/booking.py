"""
Booking ledger entry.

Key design decisions:
- Append-only: no status column, no update or delete path
- `amount` is a snapshot of the fare at creation time, never recomputed
- `class` keeps the reservation type exactly as submitted
"""

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, Index, CheckConstraint

from trainbook.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    passenger_name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    travel_class = Column("class", String(32), nullable=False)
    travel_date = Column(Date, nullable=False)
    from_station_id = Column(Integer, ForeignKey("stations.id"), nullable=False)
    to_station_id = Column(Integer, ForeignKey("stations.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("from_station_id <> to_station_id", name="check_booking_distinct_stations"),
        CheckConstraint("amount >= 0", name="check_booking_amount_non_negative"),
        # My-bookings listing: WHERE user_id = ? ORDER BY created_at DESC
        Index("ix_bookings_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, {self.from_station_id}->{self.to_station_id})>"

"""
Fare table: one row per ordered station pair with a fare for each class.

Key design decisions:
- Rows are stored directionally but read symmetrically: a missing (A, B)
  row falls back to (B, A) at lookup time
- Fare columns are nullable; a null fare means the class is not offered
"""

from sqlalchemy import Column, Integer, Numeric, ForeignKey, UniqueConstraint, CheckConstraint

from trainbook.db.base import Base


class Fare(Base):
    __tablename__ = "fares"

    id = Column(Integer, primary_key=True, index=True)
    from_station_id = Column(Integer, ForeignKey("stations.id"), nullable=False)
    to_station_id = Column(Integer, ForeignKey("stations.id"), nullable=False)
    fare_ac = Column(Numeric(10, 2), nullable=True)
    fare_sleeper = Column(Numeric(10, 2), nullable=True)
    fare_passenger = Column(Numeric(10, 2), nullable=True)

    __table_args__ = (
        UniqueConstraint("from_station_id", "to_station_id", name="uq_fare_station_pair"),
        CheckConstraint("fare_ac IS NULL OR fare_ac >= 0", name="check_fare_ac_non_negative"),
        CheckConstraint("fare_sleeper IS NULL OR fare_sleeper >= 0", name="check_fare_sleeper_non_negative"),
        CheckConstraint("fare_passenger IS NULL OR fare_passenger >= 0", name="check_fare_passenger_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Fare({self.from_station_id}->{self.to_station_id})>"

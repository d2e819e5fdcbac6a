"""
Station model. Stations are reference data: created by seeding, never
updated through the API.
"""

from sqlalchemy import Column, Integer, String

from trainbook.db.base import Base


class Station(Base):
    __tablename__ = "stations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    code = Column(String(16), nullable=False)

    def __repr__(self) -> str:
        return f"<Station(id={self.id}, code={self.code})>"

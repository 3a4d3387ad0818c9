from sqlalchemy import Boolean, Column, DateTime, Integer, String

from ..core.db import Base

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 100


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Naive UTC; whatever the client sent, never replaced by the server.
    entry_date = Column(DateTime, nullable=False, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    is_invoiced = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Order id={self.id} entry_date={self.entry_date} name={self.name!r}>"

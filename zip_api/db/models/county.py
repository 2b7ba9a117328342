from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from zip_api.db.base import Base

class County(Base):
    __tablename__ = "counties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(150), index=True)

    # The database rejects deleting a county that still has cities; the ORM must
    # neither cascade nor null out the children on its own.
    cities = relationship("City", back_populates="county", passive_deletes="all")

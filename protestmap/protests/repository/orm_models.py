from datetime import datetime

from sqlalchemy import DateTime, Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from protestmap.config.table_names import TableNames
from protestmap.models.base import Base


class Protest(Base):
    __tablename__ = TableNames.PROTESTS.value

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    # The column is called "long" in the store; the API calls it "lng".
    lng: Mapped[float | None] = mapped_column("long", Float, nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Protest {self.name} on {self.start_date}>"

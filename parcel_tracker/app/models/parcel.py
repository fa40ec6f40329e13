"""
Parcel database model.

Maps the ``parcel`` table. Column types follow the storage contract:
integers for the key and client, text for everything else (the
creation time is an RFC3339 string, not a native timestamp).
"""

from sqlalchemy import Column, Integer, String, Enum
from parcel_tracker.app.db.session import Base
from parcel_tracker.app.models.parcel_enums import ParcelStatus


class ParcelRecord(Base):
    """
    Persistent row of a tracked parcel.

    ``number`` is generated by the engine. On SQLite the table is declared
    AUTOINCREMENT so numbers of deleted rows are never handed out again.
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)

    # Ownership
    client = Column(Integer, nullable=False, index=True)

    # Status, stored as its lowercase text value
    status = Column(
        Enum(
            ParcelStatus,
            native_enum=False,
            create_constraint=False,
            length=32,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
    )

    # Delivery information
    address = Column(String, nullable=False)

    # Timestamps
    created_at = Column(String, nullable=False)

    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status.value}')>"

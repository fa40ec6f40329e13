"""
Parcel Pydantic schemas.

``Parcel`` is the in-memory value the store accepts and returns.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from parcel_tracker.app.models.parcel_enums import ParcelStatus

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def now_rfc3339() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)


class Parcel(BaseModel):
    """
    A tracked parcel.

    ``number`` stays 0 until the store assigns one; ``add`` ignores it.
    """
    model_config = ConfigDict(from_attributes=True)

    number: int = Field(default=0, ge=0, description="Store-assigned identifier")
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED)
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(default_factory=now_rfc3339, description="RFC3339 creation time")

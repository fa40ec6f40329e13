"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.

    Usual flow is REGISTERED → SENT → DELIVERED, but the store does not
    enforce any order: status is a plain label.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

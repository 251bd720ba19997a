# =============================================================================
# core/models/stats.py - Admin Summary Schema
# =============================================================================

from pydantic import Field

from .appointment import Appointment
from .base import CamelModel
from .contact import ContactMessage


class StatsResponse(CamelModel):
    """
    Returned by GET /api/admin/stats.

    Example:
        {
            "users": 3,
            "appointments": 12,
            "contacts": 4,
            "newsletters": 40,
            "recentAppointments": [...],
            "recentContacts": [...]
        }
    """
    users: int = Field(..., ge=0)
    appointments: int = Field(..., ge=0)
    contacts: int = Field(..., ge=0)
    newsletters: int = Field(..., ge=0)
    # Oldest first, at most five each
    recent_appointments: list[Appointment] = Field(default_factory=list)
    recent_contacts: list[ContactMessage] = Field(default_factory=list)

# =============================================================================
# core/services/admin_service.py - Administrative Summary
# =============================================================================

from core.models.appointment import Appointment
from core.models.contact import ContactMessage
from core.models.newsletter import NewsletterSubscription
from core.models.stats import StatsResponse
from core.models.user import User
from core.repositories import Repository

RECENT_LIMIT = 5


class AdminService:
    """Read-only view over every store, used by the admin dashboard."""

    def __init__(
        self,
        users: Repository[User],
        appointments: Repository[Appointment],
        contacts: Repository[ContactMessage],
        subscriptions: Repository[NewsletterSubscription],
    ):
        self.users = users
        self.appointments = appointments
        self.contacts = contacts
        self.subscriptions = subscriptions

    def summary(self, recent: int = RECENT_LIMIT) -> StatsResponse:
        """Counts of each store plus the newest appointments and contacts."""
        return StatsResponse(
            users=self.users.count(),
            appointments=self.appointments.count(),
            contacts=self.contacts.count(),
            newsletters=self.subscriptions.count(),
            recent_appointments=self.appointments.list(limit=recent),
            recent_contacts=self.contacts.list(limit=recent),
        )

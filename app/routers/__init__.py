# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - appointments.py: Appointment booking
# - contact.py: Contact form
# - newsletter.py: Newsletter signup
# - admin.py: Protected stats and notification status
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import appointments
from . import contact
from . import newsletter
from . import admin

__all__ = [
    "health",
    "appointments",
    "contact",
    "newsletter",
    "admin",
]

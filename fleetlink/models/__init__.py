# FleetLink database models
# Import all models here for SQLAlchemy discovery

from fleetlink.models.vehicle import Vehicle    # noqa
from fleetlink.models.booking import Booking    # noqa

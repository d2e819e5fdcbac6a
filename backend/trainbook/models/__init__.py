from trainbook.models.station import Station
from trainbook.models.fare import Fare
from trainbook.models.user import User
from trainbook.models.booking import Booking

__all__ = ["Station", "Fare", "User", "Booking"]

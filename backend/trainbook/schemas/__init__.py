from trainbook.schemas.common import MessageResponse
from trainbook.schemas.user import UserCreate, UserLogin, UserResponse, LoginResponse
from trainbook.schemas.station import StationResponse, StationListResponse
from trainbook.schemas.fare import FareRequest, FareResponse
from trainbook.schemas.booking import (
    BookingCreate, BookingDetail, BookingCreatedResponse, BookingListResponse,
)

__all__ = [
    "MessageResponse",
    "UserCreate", "UserLogin", "UserResponse", "LoginResponse",
    "StationResponse", "StationListResponse",
    "FareRequest", "FareResponse",
    "BookingCreate", "BookingDetail", "BookingCreatedResponse", "BookingListResponse",
]

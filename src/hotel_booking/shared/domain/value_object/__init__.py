from .identity import Identity as Identity
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .user_id import UserId as UserId

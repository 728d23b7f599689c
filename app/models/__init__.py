# Car rental marketplace — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.user import User         # noqa
from app.models.car import Car           # noqa
from app.models.booking import Booking   # noqa
from app.models.payment import Payment   # noqa
from app.models.review import Review     # noqa

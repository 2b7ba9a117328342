# Import all models so SQLAlchemy metadata is fully populated on startup.
from zip_api.db.models.county import County
from zip_api.db.models.city import City
from zip_api.db.models.user import User


__all__ = [
    "County",
    "City",
    "User",
]

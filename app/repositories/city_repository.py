from app.models import City
from app.repositories.base_repository import BaseRepository


class CityRepository(BaseRepository):
    model = City

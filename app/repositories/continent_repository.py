from app.models import Continent
from app.repositories.base_repository import BaseRepository


class ContinentRepository(BaseRepository):
    model = Continent

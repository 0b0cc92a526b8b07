from app.models import Country
from app.repositories.base_repository import BaseRepository


class CountryRepository(BaseRepository):
    model = Country

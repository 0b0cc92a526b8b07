from sqlalchemy import or_

from app.models import Church, City
from app.repositories.base_repository import BaseRepository


class ChurchRepository(BaseRepository):
    model = Church

    @staticmethod
    def search(search=None, city_id=None, country_id=None):
        """Churches matching a name/address substring and optional city or country."""
        query = Church.query
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(Church.name.ilike(pattern), Church.address.ilike(pattern))
            )
        if city_id is not None:
            query = query.filter(Church.city_id == city_id)
        if country_id is not None:
            query = query.join(City, Church.city_id == City.id).filter(
                City.country_id == country_id
            )
        return query.order_by(Church.id.asc()).all()

    @staticmethod
    def count_located() -> int:
        return Church.query.filter(
            Church.latitude.isnot(None), Church.longitude.isnot(None)
        ).count()

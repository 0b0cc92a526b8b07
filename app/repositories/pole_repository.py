from typing import Optional

from app.models import Pole
from app.repositories.base_repository import BaseRepository


class PoleRepository(BaseRepository):
    model = Pole

    @staticmethod
    def find_by_department(department_id: int) -> Optional[Pole]:
        """Returns the pole attached to a department, if any."""
        return Pole.query.filter_by(department_id=department_id).first()

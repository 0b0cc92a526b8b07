from app.models.continent import Continent
from app.models.country import Country
from app.models.city import City
from app.models.church import Church
from app.models.department import Department
from app.models.pole import Pole
from app.models.enums import EntityType

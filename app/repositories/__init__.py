from app.repositories.continent_repository import ContinentRepository
from app.repositories.country_repository import CountryRepository
from app.repositories.city_repository import CityRepository
from app.repositories.church_repository import ChurchRepository
from app.repositories.department_repository import DepartmentRepository
from app.repositories.pole_repository import PoleRepository

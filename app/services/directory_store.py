import logging
import threading
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from app.exceptions import (
    DuplicateConstraintError,
    IntegrityViolationError,
    InvalidReferenceError,
)
from app.extensions import db
from app.models import City, Church, Continent, Country, Department, EntityType, Pole
from app.repositories import (
    ChurchRepository,
    CityRepository,
    ContinentRepository,
    CountryRepository,
    DepartmentRepository,
    PoleRepository,
)
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

DUPLICATE_POLE_MESSAGE = "Department already has a pole"


def utc_now():
    return datetime.now(timezone.utc)


class DirectoryStore:
    """CRUD and hierarchy integrity for the continent → pole tree.

    Every read-returning call hands back plain dicts with the immediate
    relations embedded; callers never receive live model instances. Lookups
    that miss return ``None`` (or ``False`` for deletes) while integrity
    failures raise.
    """

    # Parent foreign key of each child model and where to look it up
    PARENTS = {
        Country: ("continent_id", ContinentRepository),
        City: ("country_id", CountryRepository),
        Church: ("city_id", CityRepository),
        Department: ("church_id", ChurchRepository),
        Pole: ("department_id", DepartmentRepository),
    }

    # Relations embedded into serialized entities
    RELATIONS = {
        Continent: (),
        Country: ("continent",),
        City: ("country",),
        Church: ("city",),
        Department: ("church", "pole"),
        Pole: ("department",),
    }

    def __init__(self, validate_parents=False, clock=None):
        self.validate_parents = validate_parents
        self._clock = clock or utc_now
        self._lock = threading.RLock()

    # Continents
    def list_continents(self, page=None, page_size=None):
        return self._list(ContinentRepository, page, page_size)

    def get_continent(self, continent_id: int):
        return self._get(ContinentRepository, continent_id)

    def create_continent(self, data: dict):
        return self._create(ContinentRepository, data)

    def update_continent(self, continent_id: int, patch: dict):
        return self._update(ContinentRepository, continent_id, patch)

    def delete_continent(self, continent_id: int) -> bool:
        return self._delete(
            ContinentRepository,
            continent_id,
            blocker=(
                CountryRepository,
                "continent_id",
                "Cannot delete continent with associated countries",
            ),
        )

    # Countries
    def list_countries(self, page=None, page_size=None, continent_id=None):
        return self._list(
            CountryRepository, page, page_size, "continent_id", continent_id
        )

    def get_country(self, country_id: int):
        return self._get(CountryRepository, country_id)

    def create_country(self, data: dict):
        return self._create(CountryRepository, data)

    def update_country(self, country_id: int, patch: dict):
        return self._update(CountryRepository, country_id, patch)

    def delete_country(self, country_id: int) -> bool:
        return self._delete(
            CountryRepository,
            country_id,
            blocker=(
                CityRepository,
                "country_id",
                "Cannot delete country with associated cities",
            ),
        )

    # Cities
    def list_cities(self, page=None, page_size=None, country_id=None):
        return self._list(CityRepository, page, page_size, "country_id", country_id)

    def get_city(self, city_id: int):
        return self._get(CityRepository, city_id)

    def create_city(self, data: dict):
        return self._create(CityRepository, data)

    def update_city(self, city_id: int, patch: dict):
        return self._update(CityRepository, city_id, patch)

    def delete_city(self, city_id: int) -> bool:
        return self._delete(
            CityRepository,
            city_id,
            blocker=(
                ChurchRepository,
                "city_id",
                "Cannot delete city with associated churches",
            ),
        )

    # Churches
    def list_churches(self, page=None, page_size=None, city_id=None):
        return self._list(ChurchRepository, page, page_size, "city_id", city_id)

    def get_church(self, church_id: int):
        return self._get(ChurchRepository, church_id)

    def create_church(self, data: dict):
        return self._create(ChurchRepository, data)

    def update_church(self, church_id: int, patch: dict):
        return self._update(ChurchRepository, church_id, patch)

    def delete_church(self, church_id: int) -> bool:
        return self._delete(
            ChurchRepository,
            church_id,
            blocker=(
                DepartmentRepository,
                "church_id",
                "Cannot delete church with associated departments",
            ),
        )

    # Departments
    def list_departments(self, page=None, page_size=None, church_id=None):
        return self._list(
            DepartmentRepository, page, page_size, "church_id", church_id
        )

    def get_department(self, department_id: int):
        return self._get(DepartmentRepository, department_id)

    def create_department(self, data: dict):
        return self._create(DepartmentRepository, data)

    def update_department(self, department_id: int, patch: dict):
        return self._update(DepartmentRepository, department_id, patch)

    def delete_department(self, department_id: int) -> bool:
        with self._lock:
            department = DepartmentRepository.get(department_id)
            if department is None:
                return False

            pole = PoleRepository.find_by_department(department_id)
            if pole is not None:
                logger.info(
                    f"Removing pole {pole.id} together with department {department_id}"
                )
                PoleRepository.delete(pole)
            DepartmentRepository.delete(department)
            db.session.commit()

        logger.info(f"Deleted department {department_id}")
        return True

    # Poles
    def list_poles(self, page=None, page_size=None, department_id=None):
        return self._list(
            PoleRepository, page, page_size, "department_id", department_id
        )

    def get_pole(self, pole_id: int):
        return self._get(PoleRepository, pole_id)

    def create_pole(self, data: dict):
        with self._lock:
            self._ensure_department_free(data.get("department_id"))
            return self._create(PoleRepository, data)

    def update_pole(self, pole_id: int, patch: dict):
        with self._lock:
            if "department_id" in patch and PoleRepository.get(pole_id) is not None:
                self._ensure_department_free(patch["department_id"], pole_id)
            return self._update(PoleRepository, pole_id, patch)

    def delete_pole(self, pole_id: int) -> bool:
        return self._delete(PoleRepository, pole_id)

    # Map and dashboard views
    def churches_for_map(self, search=None, city_id=None, country_id=None):
        """Churches matching the filters, split by whether they can be placed on a map."""
        located, unlocated = [], []
        for church in ChurchRepository.search(search, city_id, country_id):
            target = located if church.is_located else unlocated
            target.append(self._serialize(church))
        return {"located": located, "unlocated": unlocated}

    def stats(self):
        counts = {
            EntityType.CONTINENT.value: ContinentRepository.count(),
            EntityType.COUNTRY.value: CountryRepository.count(),
            EntityType.CITY.value: CityRepository.count(),
            EntityType.CHURCH.value: ChurchRepository.count(),
            EntityType.DEPARTMENT.value: DepartmentRepository.count(),
            EntityType.POLE.value: PoleRepository.count(),
        }
        counts["located_churches"] = ChurchRepository.count_located()
        return counts

    def is_empty(self) -> bool:
        return all(
            repository.count() == 0
            for repository in (
                ContinentRepository,
                CountryRepository,
                CityRepository,
                ChurchRepository,
                DepartmentRepository,
                PoleRepository,
            )
        )

    # Shared operations
    def _list(self, repository, page, page_size, filter_field=None, filter_value=None):
        query = repository.query()
        if filter_value is not None:
            query = query.filter(
                getattr(repository.model, filter_field) == filter_value
            )
        result = paginate(query, page, page_size)
        result["items"] = [self._serialize(entity) for entity in result["items"]]
        return result

    def _get(self, repository, entity_id):
        entity = repository.get(entity_id)
        if entity is None:
            return None
        return self._serialize(entity)

    def _create(self, repository, data):
        model = repository.model
        attrs = self._pick(model, data)
        now = self._clock()
        attrs["created_at"] = now
        attrs["updated_at"] = now

        with self._lock:
            self._check_parent(model, attrs, required=True)
            try:
                entity = repository.create(attrs)
                db.session.commit()
            except IntegrityError as e:
                db.session.rollback()
                raise self._translate_integrity_error(model, e)

            logger.info(f"Created {model.__name__.lower()} {entity.id}")
            return self._serialize(entity)

    def _update(self, repository, entity_id, patch):
        model = repository.model
        with self._lock:
            entity = repository.get(entity_id)
            if entity is None:
                return None

            attrs = self._pick(model, patch)
            self._check_parent(model, attrs)
            attrs["updated_at"] = self._clock()
            try:
                repository.update(entity, attrs)
                db.session.commit()
            except IntegrityError as e:
                db.session.rollback()
                raise self._translate_integrity_error(model, e)

            logger.info(
                f"Updated {model.__name__.lower()} {entity_id} fields={sorted(attrs)}"
            )
            return self._serialize(entity)

    def _delete(self, repository, entity_id, blocker=None):
        model = repository.model
        with self._lock:
            entity = repository.get(entity_id)
            if entity is None:
                return False

            if blocker is not None:
                child_repository, foreign_key, message = blocker
                if child_repository.exists_with(foreign_key, entity_id):
                    logger.warning(
                        f"Blocked delete of {model.__name__.lower()} {entity_id}: {message}"
                    )
                    raise IntegrityViolationError(message)

            repository.delete(entity)
            db.session.commit()

        logger.info(f"Deleted {model.__name__.lower()} {entity_id}")
        return True

    # Helpers
    @staticmethod
    def _pick(model, data):
        """Keeps only the fields a caller may set on this model."""
        data = data or {}
        return {
            field: data[field] for field in model.PATCHABLE_FIELDS if field in data
        }

    def _check_parent(self, model, attrs, required=False):
        if not self.validate_parents or model not in self.PARENTS:
            return

        field, parent_repository = self.PARENTS[model]
        if field not in attrs and not required:
            return
        value = attrs.get(field)
        if value is None or parent_repository.get(value) is None:
            raise InvalidReferenceError(field, value)

    @staticmethod
    def _ensure_department_free(department_id, pole_id=None):
        if department_id is None:
            return
        existing = PoleRepository.find_by_department(department_id)
        if existing is not None and existing.id != pole_id:
            logger.warning(
                f"Department {department_id} already has pole {existing.id}"
            )
            raise DuplicateConstraintError(DUPLICATE_POLE_MESSAGE)

    @staticmethod
    def _translate_integrity_error(model, error):
        message = str(error.orig).lower()
        if model is Pole and (
            "uq_pole_department" in message
            or "unique constraint failed: poles.department_id" in message
        ):
            return DuplicateConstraintError(DUPLICATE_POLE_MESSAGE)
        return IntegrityViolationError(
            f"Could not save {model.__name__.lower()}: {error.orig}"
        )

    def _serialize(self, entity):
        data = entity.to_dict()
        for relation in self.RELATIONS[type(entity)]:
            related = getattr(entity, relation)
            if related is not None:
                data[relation] = related.to_dict()
        return data

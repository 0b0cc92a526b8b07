import logging

logger = logging.getLogger(__name__)

CONTINENTS = ["Afrique", "Asie", "Amérique", "Europe", "Océanie"]

# Children name their parent; ids are resolved from what the store hands back
COUNTRIES = [
    {"name": "France", "continent": "Europe"},
    {"name": "Belgique", "continent": "Europe"},
    {"name": "Suisse", "continent": "Europe"},
    {"name": "Canada", "continent": "Amérique"},
]

CITIES = [
    {"name": "Paris", "country": "France"},
    {"name": "Lyon", "country": "France"},
    {"name": "Marseille", "country": "France"},
    {"name": "Bruxelles", "country": "Belgique"},
    {"name": "Genève", "country": "Suisse"},
    {"name": "Montréal", "country": "Canada"},
]

CHURCHES = [
    {
        "name": "Église Évangélique de Paris Centre",
        "address": "15 Rue de la Paix, 75001 Paris",
        "city": "Paris",
        "latitude": 48.8566,
        "longitude": 2.3522,
    },
    {
        "name": "Assemblée Chrétienne de Lyon",
        "address": "25 Avenue de la République, 69002 Lyon",
        "city": "Lyon",
        "latitude": 45.764,
        "longitude": 4.8357,
    },
    {
        "name": "Église Protestante de Marseille",
        "address": "10 Boulevard Longchamp, 13001 Marseille",
        "city": "Marseille",
        "latitude": 43.2965,
        "longitude": 5.3698,
    },
]

DEPARTMENTS = [
    {"name": "Ministère de la Jeunesse", "acronym": "MJ", "church": "Église Évangélique de Paris Centre"},
    {"name": "Ministère de la Louange", "acronym": "ML", "church": "Église Évangélique de Paris Centre"},
    {"name": "Ministère des Enfants", "acronym": "ME", "church": "Église Évangélique de Paris Centre"},
    {"name": "Ministère de l'Évangélisation", "acronym": "MEV", "church": "Assemblée Chrétienne de Lyon"},
]

# One pole per department, keyed by department acronym
POLES = [
    {"name": "Pôle Adolescents", "department": "MJ"},
    {"name": "Pôle Jeunes Adultes", "department": "MEV"},
    {"name": "Pôle Chorale", "department": "ML"},
]


def _create_all(create, rows, parent_key=None, parent_field=None, parent_ids=None, key="name"):
    """Creates rows in order and returns {row[key]: new id}."""
    ids = {}
    for row in rows:
        attrs = dict(row)
        if parent_key is not None:
            attrs[parent_field] = parent_ids[attrs.pop(parent_key)]
        ids[row[key]] = create(attrs)["id"]
    return ids


def seed_directory(store):
    """Load the sample hierarchy into an empty store.

    On a fresh database the ids match the reference dataset (Europe is
    continent 4, Paris is city 1 and so on).
    """
    if not store.is_empty():
        logger.info("Directory already populated, skipping seed")
        return False

    continent_ids = {}
    for name in CONTINENTS:
        continent_ids[name] = store.create_continent({"name": name})["id"]

    country_ids = _create_all(
        store.create_country, COUNTRIES, "continent", "continent_id", continent_ids
    )
    city_ids = _create_all(
        store.create_city, CITIES, "country", "country_id", country_ids
    )
    church_ids = _create_all(
        store.create_church, CHURCHES, "city", "city_id", city_ids
    )
    department_ids = _create_all(
        store.create_department,
        DEPARTMENTS,
        "church",
        "church_id",
        church_ids,
        key="acronym",
    )
    _create_all(
        store.create_pole, POLES, "department", "department_id", department_ids
    )

    logger.info(f"Seeded directory: {store.stats()}")
    return True

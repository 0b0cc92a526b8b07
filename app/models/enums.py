from enum import Enum


class EntityType(Enum):
    CONTINENT = "continent"
    COUNTRY = "country"
    CITY = "city"
    CHURCH = "church"
    DEPARTMENT = "department"
    POLE = "pole"

from collections import namedtuple

from flask import Blueprint, current_app, jsonify, request

from app.exceptions import (
    DuplicateConstraintError,
    IntegrityViolationError,
    InvalidReferenceError,
    MissingFieldsError,
)
from app.extensions import db
from app.utils.casing import camel_key, to_camel_case, to_snake_case

directory_bp = Blueprint("directory", __name__)

Resource = namedtuple(
    "Resource", ["plural", "singular", "parent_field", "parent_param", "required"]
)

RESOURCES = [
    Resource("continents", "continent", None, None, ("name",)),
    Resource("countries", "country", "continent_id", "continentId", ("name", "continent_id")),
    Resource("cities", "city", "country_id", "countryId", ("name", "country_id")),
    Resource("churches", "church", "city_id", "cityId", ("name", "address", "city_id")),
    Resource("departments", "department", "church_id", "churchId", ("name", "acronym", "church_id")),
    Resource("poles", "pole", "department_id", "departmentId", ("name", "department_id")),
]


def get_store():
    return current_app.extensions["directory_store"]


def parse_id(raw):
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _parent_id_error(resource, data):
    """Coerces a supplied parent id to int, returning an error response if malformed."""
    field = resource.parent_field
    if field is None or data.get(field) is None:
        return None

    parent_id = parse_id(data[field])
    if parent_id is None:
        parent = field[: -len("_id")]
        return _error(f"Invalid {parent} ID", 400)
    data[field] = parent_id
    return None


def _error(message, status, **extra):
    return jsonify({"success": False, "error": message, **extra}), status


def _is_blank(value):
    return value is None or (isinstance(value, str) and value.strip() == "")


def _read_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return to_snake_case(data)


def _store_failure(e, action, resource):
    """Maps store and unexpected errors onto a failure response."""
    if isinstance(e, (IntegrityViolationError, DuplicateConstraintError)):
        return _error(str(e), 409)
    if isinstance(e, InvalidReferenceError):
        return _error(str(e), 400)

    db.session.rollback()
    current_app.logger.error(f"Error {action} {resource.singular}: {str(e)}")
    return _error(f"Failed to {action} {resource.singular}", 500)


def _make_list_view(resource):
    def view():
        page = request.args.get("page", type=int)
        limit = request.args.get("limit", type=int)
        filters = {}
        if resource.parent_field:
            parent_id = request.args.get(resource.parent_param, type=int)
            if parent_id is not None:
                filters[resource.parent_field] = parent_id

        try:
            result = getattr(get_store(), f"list_{resource.plural}")(page, limit, **filters)
        except Exception as e:
            current_app.logger.error(f"Error fetching {resource.plural}: {str(e)}")
            return _error(f"Failed to fetch {resource.plural}", 500)

        return jsonify(
            to_camel_case(
                {
                    "success": True,
                    "data": result["items"],
                    "total": result["total"],
                    "page": result["page"],
                    "page_size": result["page_size"],
                }
            )
        ), 200

    return view


def _make_create_view(resource):
    def view():
        data = _read_body()
        if data is None:
            return _error("No data provided", 400)

        try:
            missing = [field for field in resource.required if _is_blank(data.get(field))]
            if missing:
                raise MissingFieldsError(missing)
            invalid = _parent_id_error(resource, data)
            if invalid is not None:
                return invalid
            created = getattr(get_store(), f"create_{resource.singular}")(data)
        except MissingFieldsError as e:
            return _error(
                "Missing required fields",
                400,
                missing_fields=[camel_key(field) for field in e.fields],
            )
        except Exception as e:
            return _store_failure(e, "create", resource)

        return jsonify({"success": True, "data": to_camel_case(created)}), 201

    return view


def _make_get_view(resource):
    def view(entity_id):
        entity_id = parse_id(entity_id)
        if entity_id is None:
            return _error(f"Invalid {resource.singular} ID", 400)

        entity = getattr(get_store(), f"get_{resource.singular}")(entity_id)
        if entity is None:
            return _error(f"{resource.singular.capitalize()} not found", 404)

        return jsonify({"success": True, "data": to_camel_case(entity)}), 200

    return view


def _make_update_view(resource):
    def view(entity_id):
        entity_id = parse_id(entity_id)
        if entity_id is None:
            return _error(f"Invalid {resource.singular} ID", 400)

        data = _read_body()
        if data is None:
            return _error("No data provided", 400)
        if "name" in data and _is_blank(data["name"]):
            return _error(f"{resource.singular.capitalize()} name cannot be empty", 400)
        invalid = _parent_id_error(resource, data)
        if invalid is not None:
            return invalid

        try:
            updated = getattr(get_store(), f"update_{resource.singular}")(entity_id, data)
        except Exception as e:
            return _store_failure(e, "update", resource)

        if updated is None:
            return _error(f"{resource.singular.capitalize()} not found", 404)
        return jsonify({"success": True, "data": to_camel_case(updated)}), 200

    return view


def _make_delete_view(resource):
    def view(entity_id):
        entity_id = parse_id(entity_id)
        if entity_id is None:
            return _error(f"Invalid {resource.singular} ID", 400)

        try:
            deleted = getattr(get_store(), f"delete_{resource.singular}")(entity_id)
        except Exception as e:
            return _store_failure(e, "delete", resource)

        if not deleted:
            return _error(f"{resource.singular.capitalize()} not found", 404)
        return jsonify(
            {
                "success": True,
                "message": f"{resource.singular.capitalize()} deleted successfully",
            }
        ), 200

    return view


def register_resource(blueprint, resource):
    collection = f"/{resource.plural}"
    item = f"/{resource.plural}/<entity_id>"

    blueprint.add_url_rule(
        collection, f"list_{resource.plural}", _make_list_view(resource), methods=["GET"]
    )
    blueprint.add_url_rule(
        collection, f"create_{resource.singular}", _make_create_view(resource), methods=["POST"]
    )
    blueprint.add_url_rule(
        item, f"get_{resource.singular}", _make_get_view(resource), methods=["GET"]
    )
    blueprint.add_url_rule(
        item, f"update_{resource.singular}", _make_update_view(resource), methods=["PUT"]
    )
    blueprint.add_url_rule(
        item, f"delete_{resource.singular}", _make_delete_view(resource), methods=["DELETE"]
    )


for _resource in RESOURCES:
    register_resource(directory_bp, _resource)

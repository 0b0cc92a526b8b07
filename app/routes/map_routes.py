from flask import Blueprint, current_app, jsonify, request

from app.routes.directory_routes import get_store
from app.utils.casing import to_camel_case

map_bp = Blueprint("map", __name__)


@map_bp.route("/map/churches", methods=["GET"])
def get_map_churches():
    """Churches for the map view, split into placeable and missing coordinates"""
    search = (request.args.get("search") or "").strip() or None
    city_id = request.args.get("cityId", type=int)
    country_id = request.args.get("countryId", type=int)

    try:
        result = get_store().churches_for_map(search, city_id, country_id)
    except Exception as e:
        current_app.logger.error(f"Error fetching map churches: {str(e)}")
        return jsonify({"success": False, "error": "Failed to fetch churches"}), 500

    return jsonify({"success": True, "data": to_camel_case(result)}), 200


@map_bp.route("/stats", methods=["GET"])
def get_stats():
    try:
        stats = get_store().stats()
    except Exception as e:
        current_app.logger.error(f"Error fetching stats: {str(e)}")
        return jsonify({"success": False, "error": "Failed to fetch stats"}), 500

    return jsonify({"success": True, "data": to_camel_case(stats)}), 200

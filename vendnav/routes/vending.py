# vendnav/routes/vending.py
"""Vending machine routes and blueprint configuration."""

import logging

from flask import Blueprint, jsonify, request

from vendnav.api.config import VALID_PROVIDERS, get_maps_provider, get_max_stops
from vendnav.api.errors import (
    CatalogError,
    ConfigError,
    EmptyCandidateSetError,
    InvalidCoordinateError,
)
from vendnav.api.machines import load_machines
from vendnav.api.services.route_service import RouteService

logger = logging.getLogger(__name__)


class BadRequestOption(ValueError):
    """A query option other than the coordinates is unusable."""


def create_vending_blueprint():
    """Create and configure the vending blueprint.

    Returns:
        Configured Flask Blueprint
    """
    vending_bp = Blueprint("vending", __name__, url_prefix="/vending")

    @vending_bp.errorhandler(InvalidCoordinateError)
    def bad_coordinate(e):
        return jsonify({"error": str(e)}), 400

    @vending_bp.errorhandler(BadRequestOption)
    def bad_option(e):
        return jsonify({"error": str(e)}), 400

    @vending_bp.errorhandler(EmptyCandidateSetError)
    def no_machines(e):
        return jsonify({"error": str(e)}), 404

    @vending_bp.errorhandler(CatalogError)
    def broken_catalog(e):
        logger.error(f"Catalog error: {e}")
        return jsonify({"error": "Vending machine data unavailable"}), 500

    @vending_bp.errorhandler(ConfigError)
    def broken_config(e):
        logger.error(f"Configuration error: {e}")
        return jsonify({"error": "Server misconfigured"}), 500

    def _requested_provider():
        """Provider from the query string, or the configured default."""
        provider = request.args.get("provider")
        if provider is None:
            provider = get_maps_provider()
            if provider not in VALID_PROVIDERS:
                raise ConfigError(f"Invalid maps provider in configuration: {provider!r}")
            return provider
        provider = provider.lower()
        if provider not in VALID_PROVIDERS:
            raise BadRequestOption(
                f"Unknown maps provider '{provider}'. Must be one of: {', '.join(VALID_PROVIDERS)}"
            )
        return provider

    def _requested_max_stops():
        max_stops = request.args.get("max_stops")
        if max_stops is None:
            return get_max_stops()
        try:
            max_stops = int(max_stops)
        except ValueError:
            raise BadRequestOption("max_stops must be an integer") from None
        if max_stops < 0:
            raise BadRequestOption("max_stops must not be negative")
        return max_stops

    @vending_bp.route("/api/config")
    def api_config():
        """Return navigation configuration for the frontend."""
        return jsonify({
            "maps_provider": get_maps_provider(),
            "max_stops": get_max_stops(),
        })

    @vending_bp.route("/api/machines")
    def api_machines():
        """List every known machine with the bounds to fit them on a map."""
        machines = load_machines()
        return jsonify({
            "machines": [m.to_dict() for m in machines],
            "bounds": RouteService.calculate_bounds(machines),
        })

    @vending_bp.route("/api/nearest")
    def api_nearest():
        """Closest machine to the caller's position."""
        origin = RouteService.parse_coordinate(request.args.get("lat"), request.args.get("lng"))
        provider = _requested_provider()
        return jsonify(RouteService.find_nearest(origin, provider))

    @vending_bp.route("/api/route")
    def api_route():
        """Greedy multi-stop route from the caller's position."""
        origin = RouteService.parse_coordinate(request.args.get("lat"), request.args.get("lng"))
        provider = _requested_provider()
        max_stops = _requested_max_stops()
        return jsonify(RouteService.plan(origin, max_stops, provider))

    @vending_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "vending"})

    return vending_bp


__all__ = ['create_vending_blueprint']

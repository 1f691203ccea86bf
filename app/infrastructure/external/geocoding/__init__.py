"""Geocoding providers."""

from app.infrastructure.external.geocoding.google_geocoder import GoogleGeocoder

__all__ = ["GoogleGeocoder"]

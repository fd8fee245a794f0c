"""Jinja2 based HTML view renderer assembled from a service container."""

"""Geometry, pod tracking and the turn loop."""

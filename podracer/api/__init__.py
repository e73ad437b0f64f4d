"""Referee input/output."""

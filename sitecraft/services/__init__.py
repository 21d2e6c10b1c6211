"""Sitecraft services."""

"""Adapters – integrations with external systems."""

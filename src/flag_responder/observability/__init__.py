"""Observability – structured logging and correlation ids."""

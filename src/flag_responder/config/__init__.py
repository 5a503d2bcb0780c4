"""Config – env-based settings and validation errors."""

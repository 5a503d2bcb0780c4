"""Adapters – LaunchDarkly provider and FastAPI surface."""

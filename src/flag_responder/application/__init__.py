"""Application layer – feature flag ports and use cases."""

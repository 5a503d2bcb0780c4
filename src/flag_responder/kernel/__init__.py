"""Kernel – framework-agnostic building blocks (errors, clock)."""

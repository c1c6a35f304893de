"""Adapters wrapping third-party document tooling."""

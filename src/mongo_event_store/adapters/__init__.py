"""Adapters – infrastructure implementations of the application ports."""

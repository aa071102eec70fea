"""Shared utilities for the lookup handler: observability, responses, errors and telemetry."""

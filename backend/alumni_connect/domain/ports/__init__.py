"""Ports - abstractions implemented by the infrastructure layer."""

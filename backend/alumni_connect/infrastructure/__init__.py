"""
Infrastructure Layer - Implementations of the domain ports.
"""

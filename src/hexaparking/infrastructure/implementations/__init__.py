"""Concrete storage adapters selected by InfrastructureFactory."""

"""Слой доступа к Docker engine."""

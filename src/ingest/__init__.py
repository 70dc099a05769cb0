"""Employee import pipeline.

This package reads CSV and XML sources, validates each unit, and feeds
accepted employee records into a registry.
"""

"""Service layer — validation entry points returning ValidationReport.

Services may import from domain and config layers.
"""

"""Configuration — settings model and logging setup."""

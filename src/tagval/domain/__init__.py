"""Domain layer — rule grammar, descriptors, evaluation, and field binding.

This layer depends only on stdlib and pydantic.
It must never import from services or config at runtime.
"""

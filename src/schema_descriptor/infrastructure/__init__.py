"""Infrastructure layer: descriptor constructors, predicates and validation.

This package wraps the external libraries (pydantic, annotated_types) so the
domain layer only ever talks to ``descriptors`` and ``predicates``.
"""

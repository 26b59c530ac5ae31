"""Infrastructure Layer: cross-cutting concerns (logging setup).

Invariants:
    - Infrastructure reads Settings but never imports core/ evaluation logic
"""

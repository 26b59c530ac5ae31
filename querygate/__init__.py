"""querygate: turns in-flight remote fetches into a single schema-verified verdict.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - Import from submodules explicitly, e.g. querygate.core.combined_boundary
"""

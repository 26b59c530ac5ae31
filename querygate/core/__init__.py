"""Core Layer: pure evaluation of remote fetch state, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from boundary, presentation, api/, infrastructure/ or config
    - All functions are pure and deterministic given the same source snapshots
"""

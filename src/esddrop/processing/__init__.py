"""Public API surface for esddrop.processing."""
__all__ = [
    "aggregator",
    "input_classifier",
    "overrides",
]

"""Infrastructure layer — operational concerns for the scale calculator.

Modules:
    metrics     Prometheus metrics registry.
"""

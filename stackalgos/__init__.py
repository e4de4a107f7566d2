"""Stacks, queues, min-stacks, expression notation conversion and monotonic-stack algorithms."""

__version__ = "0.1.0"

__all__ = ["stacks", "queues", "min_stack", "notation", "monotonic", "subarrays"]
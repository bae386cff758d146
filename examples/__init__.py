"""
typetour examples package.

This package contains demonstration scripts showing how to use the typetour helpers.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Running the whole tour programmatically
- async_patterns.py: Retry, fail-fast batches and races with custom latency
"""

"""Platform modules of neo-catalog.

- tags: tag label lookup caches
- data_insight: data insight aggregation post-processing
"""

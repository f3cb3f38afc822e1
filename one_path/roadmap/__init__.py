"""
Roadmap helpers: flattening the roadmap hierarchy into study units and
resolving video resources to embeddable IDs.
"""

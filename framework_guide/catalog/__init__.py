"""
Static reference data for the recommendation engine.

Responsibilities:
- Define the requirement flags and project types callers choose from.
- Hold the read-only framework catalog, keyed by type+key identifiers.
- Compare frameworks of the same project type feature by feature.
"""

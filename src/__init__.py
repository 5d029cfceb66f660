"""NRDOT Dashboard Publisher.

Creates the NRDOT v2 process optimization dashboard in New Relic:
- Dashboard definition (pages, widgets, NRQL queries, grid layout)
- NerdGraph client (environment settings, single-shot GraphQL POST)
- Publisher (dashboardCreate mutation, error interpretation, summary file)
"""

__version__ = "0.1.0"

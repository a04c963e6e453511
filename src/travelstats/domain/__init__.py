"""Domain layer for travelstats."""

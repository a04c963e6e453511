"""Application layer for travelstats."""

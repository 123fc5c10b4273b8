"""Domain layer - subset reconciliation entities, values and services."""

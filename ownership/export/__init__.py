"""Output writers for ownership results."""

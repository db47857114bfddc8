"""Package-wide constants."""

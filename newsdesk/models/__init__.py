"""Domain, API and upstream payload models."""

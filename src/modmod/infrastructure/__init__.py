"""Infrastructure for modmod: configuration and log locations."""

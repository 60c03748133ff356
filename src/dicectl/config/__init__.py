"""Configuration: TOML discovery, settings models, logging."""

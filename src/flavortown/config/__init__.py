"""Configuration — settings, TOML discovery, credentials, and logging."""

"""Infrastructure layer — HTTP access to the Flavortown API."""

"""Infrastructure: persistence, security, external services."""

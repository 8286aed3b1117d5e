"""Provider-specific symbol mappers."""

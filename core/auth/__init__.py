"""Authentication and security context."""

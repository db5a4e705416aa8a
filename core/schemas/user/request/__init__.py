"""User request schemas."""

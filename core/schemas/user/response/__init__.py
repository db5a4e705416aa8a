"""User response schemas."""

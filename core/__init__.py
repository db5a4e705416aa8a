"""Core application for the idea service."""

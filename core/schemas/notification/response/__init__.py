"""Notification response schemas."""

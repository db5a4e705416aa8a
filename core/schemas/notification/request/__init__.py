"""Notification request schemas."""

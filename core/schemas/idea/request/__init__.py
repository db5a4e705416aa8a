"""Idea request schemas."""

"""Idea response schemas."""

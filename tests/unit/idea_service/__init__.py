"""Tests for the idea_service project package."""

"""Django project for the improvement idea service."""

"""Common utilities shared by the API and CLI."""

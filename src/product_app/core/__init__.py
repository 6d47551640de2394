"""Core services and exceptions."""

"""Core helpers shared by models and services."""

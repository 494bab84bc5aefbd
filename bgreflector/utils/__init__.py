"""Configuration, logging and file helpers."""

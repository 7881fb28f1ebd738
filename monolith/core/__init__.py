"""Core services: logging, settings, template and preset loading."""

"""Helpers: scheduling, logging, settings, and CLI options."""

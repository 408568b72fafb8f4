"""Core data model, time sources, events and configuration."""

"""Configuration and process-wide setup."""

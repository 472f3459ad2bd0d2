"""Core infrastructure: constants, exception taxonomy, render configuration."""

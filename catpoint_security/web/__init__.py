"""JSON control API for the security system."""

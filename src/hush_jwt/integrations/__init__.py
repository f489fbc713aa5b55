"""Framework integrations for hush-jwt."""

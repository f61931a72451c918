"""Configuration, logging and the model gateway."""

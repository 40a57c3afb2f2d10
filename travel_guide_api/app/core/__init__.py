"""Configuration, logging, storage, access control and error handling."""

"""Core: configuration, exceptions, logging and protocols."""

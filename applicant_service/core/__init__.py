"""Core configuration, logging, constants, errors and metrics."""

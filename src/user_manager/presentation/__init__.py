"""Presentation Layer - screen state holders and the command line interface."""

"""
Application layer: configuration, logging setup and the command-line entry point.
"""

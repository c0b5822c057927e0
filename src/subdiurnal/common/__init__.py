"""Configuration, logging, command line, and exception support shared by the package."""

"""Management command line tools."""

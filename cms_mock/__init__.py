"""CMS mock server — fixture-backed stand-in for the course management API."""

__version__ = "0.1.0"

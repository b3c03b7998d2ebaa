"""ClearOut — scan a bio page and classify every outbound link."""

__version__ = "0.1.0"

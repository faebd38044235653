"""Check an OpenClaw JSON config against the validator shipped in its build output."""

__version__ = "0.1.0"

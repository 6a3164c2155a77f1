"""Unit tests for the shared core and the service adapters."""

"""Test-suite for the Filmorate API."""

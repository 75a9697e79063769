"""
Version 1 of the API.

This subpackage bundles the user and film endpoints.
"""

"""
Version 1 of the orders API.

Breaking changes to routes or payloads belong in a new version
subpackage so existing clients keep working.
"""

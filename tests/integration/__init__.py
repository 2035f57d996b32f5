# Integration Tests
"""
Integration tests run the services against an in-memory SQLite database.
"""

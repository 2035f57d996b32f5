# Photo visibility test suite
"""
Tests for the photo and album authorisation rules.

Key principle: every visibility rule is checked through both the
single-photo check and the query filter.
"""

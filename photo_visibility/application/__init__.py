"""Application layer - authorisation rules and use cases."""

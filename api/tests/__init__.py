"""
Test package for the GraphQL API.
"""

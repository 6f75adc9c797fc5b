"""Resolver package for GraphQL schema.

Resolver functions referenced by the GraphQL types and queries live in
sibling modules.
"""

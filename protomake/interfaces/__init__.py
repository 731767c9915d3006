"""
Shared type aliases used across the protomake package.
"""

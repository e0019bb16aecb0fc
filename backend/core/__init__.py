"""
Configuration and logging shared across the backend.
"""

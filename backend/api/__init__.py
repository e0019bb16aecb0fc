"""
HTTP routes for the lead forms API.
"""

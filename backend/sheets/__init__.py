"""
Google Sheets integration: credentials, client and row helpers.
"""

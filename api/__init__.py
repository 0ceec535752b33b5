"""
HTTP API for the Signal Intelligence Core.
"""

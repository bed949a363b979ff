"""
Newsdesk Backend

A FastAPI backend for the Newsdesk web client.
Provides user removal, feed validation, and AI-ranked daily article scans.
"""

__version__ = "1.0.0"

"""
YouTube live stream provisioning.

Authorizes with Google OAuth2, then creates a live stream, schedules a
broadcast, and binds the two through the YouTube Data API v3.
"""

__version__ = "0.1.0"

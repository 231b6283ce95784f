"""
OAuth, client secrets, API client, and logging helpers.
"""

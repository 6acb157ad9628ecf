"""
Shared service utilities.

- http.py - the long-lived HTTP session used by every datasource
"""

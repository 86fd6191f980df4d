"""
Shared service utilities.

- http.py - requests session used by every HTTP-based datasource
"""

"""
Framework Choice Guide service.

Recommends a software framework from a small static rule table, generates a
ready-to-paste setup prompt, and keeps an append-only history of both.
"""

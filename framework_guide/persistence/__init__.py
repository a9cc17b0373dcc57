"""
Persistence gateway.

Responsibilities:
- Own the SQLAlchemy engine and session factory.
- Append recommendation events and prompt-history records.
- Fold stored recommendations into usage statistics.
"""

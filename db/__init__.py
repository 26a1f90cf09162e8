"""
Database module for contribution persistence.
"""

from db.contribution_db import get_contribution_db, ContributionDB

__all__ = ['get_contribution_db', 'ContributionDB']

"""
Session module.

Holds the in-memory authorization state of a B2 account.
"""
from .models import SessionData, KeyCapability, KeyRestrictions, TOKEN_LIFETIME

__all__ = [
    'SessionData',
    'KeyCapability',
    'KeyRestrictions',
    'TOKEN_LIFETIME',
]

"""
DeviOS Session Module

Provides session state and authentication:
- Session state and history cursor
- Feature levels
- sudo challenge
"""

from .session import Session, AuthChallenge, FeatureLevel
from .auth import SudoAuthenticator

__all__ = [
    'Session',
    'AuthChallenge',
    'FeatureLevel',
    'SudoAuthenticator',
]

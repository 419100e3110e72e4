"""
Services package initialization
"""

from acadreq.services.auth_service import AuthService
from acadreq.services.request_service import RequestService, compute_stats

__all__ = ['AuthService', 'RequestService', 'compute_stats']

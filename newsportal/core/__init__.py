"""
NewsPortal Core
===============

Core utilities and shared functionality for NewsPortal modules.
"""

from .config import Config
from .logging_service import LoggingService, logger
from .supabase_client import get_supabase

__all__ = ['Config', 'LoggingService', 'logger', 'get_supabase']

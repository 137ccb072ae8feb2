from .general_utils import log, handle_error, setup_logging

__all__ = ['log', 'handle_error', 'setup_logging']

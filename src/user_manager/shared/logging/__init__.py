from user_manager.shared.logging.setup import setup_logging

__all__ = ["setup_logging"]

"""
flag_responder – Flag-aware HTTP demo service backed by LaunchDarkly.

Import path convention::

    from flag_responder.application.feature_flags import build_context, evaluate_flags
    from flag_responder.adapters.fastapi import create_app
    from flag_responder.config.settings import AppSettings
"""

__version__ = "1.0.0"
__all__ = ["__version__"]

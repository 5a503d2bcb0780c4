"""Kernel time – Clock port + implementations."""
from flag_responder.kernel.time.clock import Clock, FrozenClock, SystemClock, isoformat_z

__all__ = ["Clock", "FrozenClock", "SystemClock", "isoformat_z"]

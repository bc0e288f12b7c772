"""Dispatch module.

Background worker to foreground event loop handoff.
"""
from fp_utils.dispatch.dispatcher import Dispatcher

__all__ = ["Dispatcher"]

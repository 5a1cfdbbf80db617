"""
Event system for the twentyone engine.

The shoe manager publishes reshuffle events through an `EventEmitter`.
"""

from twentyone.events.emitter import EventEmitter, EventPriority, ShoeEventType

__all__ = ["EventEmitter", "EventPriority", "ShoeEventType"]

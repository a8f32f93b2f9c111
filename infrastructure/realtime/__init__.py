from infrastructure.realtime.listener import RealtimeContentListener

__all__ = ["RealtimeContentListener"]

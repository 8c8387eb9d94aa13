from .misc import today, format_clock, format_work_time

__all__ = ["today", "format_clock", "format_work_time"]

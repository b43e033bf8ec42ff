"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import time


class ConvertUtils:
    @staticmethod
    def hash_to_hex(digest: bytes) -> str:
        """
        Render a digest as an uppercase hex string without separators (e.g., '0AFF12').
        """
        return digest.hex().upper()

    @staticmethod
    def timestamp_to_human(timestamp: float, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
        """
        Convert a Unix timestamp to a human-readable string.
        Uses local time by default.
        """
        try:
            return time.strftime(fmt, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            return "Invalid timestamp"

    @staticmethod
    def seconds_to_timespan(seconds: float) -> str:
        """
        Convert elapsed seconds to '[-][D.]HH:MM:SS[.fffffff]' (100ns resolution).
        The fraction is omitted when it is zero, the day count when it is zero.
        Negative durations get a leading '-' (e.g., '-00:00:00.5000000').
        """
        ticks = round(seconds * 10_000_000)
        sign = "-" if ticks < 0 else ""
        whole_seconds, fraction = divmod(abs(ticks), 10_000_000)
        minutes, secs = divmod(whole_seconds, 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)

        result = f"{hours:02d}:{minutes:02d}:{secs:02d}"
        if days:
            result = f"{days}.{result}"
        if fraction:
            result = f"{result}.{fraction:07d}"
        return sign + result

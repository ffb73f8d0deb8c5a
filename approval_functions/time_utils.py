import time


def now_ms() -> int:
    """Current time as epoch milliseconds, the format used for `ts` fields"""
    return int(time.time() * 1000)

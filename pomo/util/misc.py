from datetime import date


# Today's local calendar date. Everything that decides "is this a new day" goes through here.
def today():
    return date.today()


# Countdown display, MM:SS. Minutes are allowed to run past 59 for long custom durations.
def format_clock(seconds):
    seconds = max(0, int(seconds))
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


# Accumulated work time display, HH:MM (seconds are dropped).
def format_work_time(seconds):
    seconds = max(0, int(seconds))
    h, rem = divmod(seconds, 3600)
    return f"{h:02d}:{rem // 60:02d}"

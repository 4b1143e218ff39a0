"""Display labels for report summaries."""


def format_duration(ms: float) -> str:
    """Format milliseconds as ``m:ss``, or ``h:mm:ss`` past one hour."""
    total_seconds = int(ms // 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def wpm_label(wpm: float) -> str:
    if wpm < 100:
        return "Slow"
    if wpm <= 150:
        return "Optimal"
    if wpm <= 180:
        return "Fast"
    return "Too Fast"


def score_label(score: float) -> str:
    if score >= 90:
        return "Excellent"
    if score >= 75:
        return "Good"
    if score >= 60:
        return "Fair"
    return "Needs Work"

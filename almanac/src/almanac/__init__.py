"""Chinese day-almanac arithmetic."""

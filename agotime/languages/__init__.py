"""Natural languages for formatting durations, and lookup by name or ISO 639-1 code."""
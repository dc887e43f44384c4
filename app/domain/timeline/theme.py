COLORS = {
    "background": "#0d1117",
    "surface": "#161b22",
    "surface_light": "#21262d",
    "border": "#30363d",
    "text": "#c9d1d9",
    "text_muted": "#8b949e",
    "accent": "#58a6ff",
    "success": "#3fb950",
    "danger": "#f85149",
    "warning": "#d29922",
}

FONTS = {
    "mono": "'JetBrains Mono', 'Fira Code', monospace",
    "sans": "'Inter', -apple-system, sans-serif",
}

STATUS_COLORS = {
    "added": COLORS["success"],
    "modified": COLORS["warning"],
    "deleted": COLORS["danger"],
    "renamed": COLORS["accent"],
}

STATUS_LABELS = {
    "added": "A",
    "modified": "M",
    "deleted": "D",
    "renamed": "R",
}

LINE_BACKGROUNDS = {
    "addition": "rgba(63, 185, 80, 0.15)",
    "deletion": "rgba(248, 81, 73, 0.15)",
    "context": "transparent",
}

LINE_INDICATORS = {
    "addition": "+",
    "deletion": "-",
    "context": " ",
}

LINE_INDICATOR_COLORS = {
    "addition": COLORS["success"],
    "deletion": COLORS["danger"],
    "context": COLORS["text_muted"],
}

THEMES = {
    "Light": {
        "bg": "#f5f6fa",
        "panel": "#ffffff",
        "text": "#2c3e50",
        "text_muted": "#7f8c8d",
        "button_bg": "#ecf0f1",
        "button_hover": "#dfe6e9",
        "button_disabled": "#bdc3c7",
        "banner_bg": "#2c3e50",
        "banner_text": "#ffffff",
    },
    "Dark": {
        "bg": "#1e1f26",
        "panel": "#2a2c36",
        "text": "#ecf0f1",
        "text_muted": "#95a5a6",
        "button_bg": "#3a3d4a",
        "button_hover": "#474b5b",
        "button_disabled": "#5a5e6e",
        "banner_bg": "#ecf0f1",
        "banner_text": "#1e1f26",
    },
}

# Clock ring colour per mode value ("work" / "break" / "long")
MODE_COLORS = {
    "work": "#e74c3c",
    "break": "#2ecc71",
    "long": "#3498db",
}

MODE_LABELS = {
    "work": "Work",
    "break": "Short Break",
    "long": "Long Break",
}

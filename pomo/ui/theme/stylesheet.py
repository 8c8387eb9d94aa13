from .colors import MODE_COLORS


def build_stylesheet(theme, font_family="Segoe UI"):
    t = theme
    return f"""
        QMainWindow, QDialog {{
            background-color: {t['bg']};
        }}
        QWidget {{
            color: {t['text']};
            font-family: "{font_family}";
        }}
        QLabel#mutedLabel {{
            color: {t['text_muted']};
        }}
        QPushButton {{
            background-color: {t['button_bg']};
            border: none;
            border-radius: 6px;
            padding: 6px 14px;
        }}
        QPushButton:hover {{
            background-color: {t['button_hover']};
        }}
        QPushButton:disabled {{
            color: {t['button_disabled']};
        }}
        QLabel#banner {{
            background-color: {t['banner_bg']};
            color: {t['banner_text']};
            border-radius: 6px;
            padding: 6px 12px;
        }}
    """


# Style for the big countdown frame. The border follows the current mode.
def build_clock_stylesheet(theme, mode_value):
    border = MODE_COLORS.get(mode_value, MODE_COLORS["work"])
    return (
        f"QFrame#clock {{ background-color: {theme['panel']}; "
        f"border: 6px solid {border}; border-radius: 16px; }}"
    )

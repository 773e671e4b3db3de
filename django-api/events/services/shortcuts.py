"""Keyboard feedback: the last-pressed-key label and the new-event shortcut."""

NEW_EVENT_KEY = "n"
TEXT_ENTRY_TAGS = frozenset({"INPUT", "TEXTAREA"})


def key_press_label(key: str) -> str:
    return f"You Pressed: {key}"


class KeyPressDisplay:
    """Tracks the label for the most recent key press."""

    def __init__(self) -> None:
        self.label = ""

    def press(self, key: str, focused_tag: str | None = None) -> bool:
        """Record a key press.

        Returns True when the press should move focus to the new event title,
        i.e. "n" typed while focus is outside any text entry.
        """
        self.label = key_press_label(key)
        if key != NEW_EVENT_KEY:
            return False
        return (focused_tag or "").upper() not in TEXT_ENTRY_TAGS

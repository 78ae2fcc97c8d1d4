from truthbot.chat.render import confidence_band, render_message, render_notification
from truthbot.chat.session import ASSESSMENT_INTRO, GREETING, ChatSession

__all__ = [
    "ASSESSMENT_INTRO",
    "ChatSession",
    "GREETING",
    "confidence_band",
    "render_message",
    "render_notification",
]

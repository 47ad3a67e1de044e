"""Chat widget service — fixed keyword matching, English and Hindi replies.

Rules are evaluated in order against the lower-cased message and the first
topic with a matching keyword wins. Matching is plain substring search, so
``"this"`` still counts as a greeting because it contains ``"hi"``.
"""

import logging

from campus_portal.domain.entities import ChatReply
from campus_portal.domain.exceptions import ChatbotError

logger = logging.getLogger(__name__)

ENGLISH = "english"
HINDI = "hindi"

_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("greeting", ("hello", "hi", "नमस्ते")),
    ("admissions", ("admission", "प्रवेश")),
    ("departments", ("department", "विभाग")),
    ("notices", ("notice", "सूचना")),
    ("contact", ("contact", "संपर्क")),
    ("faculty", ("faculty", "संकाय")),
]

_RESPONSES: dict[str, dict[str, str]] = {
    ENGLISH: {
        "greeting": "Hello! I'm the St. Columba's College virtual assistant. How can I help you today?",
        "admissions": (
            "For admissions information, please visit our admissions page or contact our office "
            "at +91-6546-272XXX. We offer undergraduate and postgraduate programs."
        ),
        "departments": (
            "We have various departments including Arts, Science, Commerce, and Computer Science. "
            "Each department offers excellent academic programs."
        ),
        "notices": (
            "You can check the latest notices on our notices page. We regularly update information "
            "about examinations, events, and important announcements."
        ),
        "contact": (
            "You can reach us at admin@stcolumbascollege.edu.in or call +91-6546-272XXX. "
            "Our office is open Monday to Friday, 9 AM to 5 PM."
        ),
        "faculty": (
            "Our experienced faculty members are dedicated to providing quality education. "
            "You can find faculty information in the respective department sections."
        ),
        "default": (
            "Thank you for your question about St. Columba's College. For specific information, "
            "please visit our website sections or contact our office directly."
        ),
    },
    HINDI: {
        "greeting": "नमस्ते! मैं सेंट कोलंबा कॉलेज का वर्चुअल सहायक हूं। आज मैं आपकी कैसे मदद कर सकता हूं?",
        "admissions": (
            "प्रवेश की जानकारी के लिए, कृपया हमारे प्रवेश पृष्ठ पर जाएं या +91-6546-272XXX पर हमारे "
            "कार्यालय से संपर्क करें। हम स्नातक और स्नातकोत्तर कार्यक्रम प्रदान करते हैं।"
        ),
        "departments": (
            "हमारे पास कला, विज्ञान, वाणिज्य और कंप्यूटर विज्ञान सहित विभिन्न विभाग हैं। "
            "प्रत्येक विभाग उत्कृष्ट शैक्षणिक कार्यक्रम प्रदान करता है।"
        ),
        "notices": (
            "आप हमारे नोटिस पृष्ठ पर नवीनतम सूचनाएं देख सकते हैं। हम परीक्षा, कार्यक्रम और महत्वपूर्ण "
            "घोषणाओं के बारे में नियमित रूप से जानकारी अपडेट करते हैं।"
        ),
        "contact": (
            "आप हमसे admin@stcolumbascollege.edu.in पर संपर्क कर सकते हैं या +91-6546-272XXX पर कॉल "
            "कर सकते हैं। हमारा कार्यालय सोमवार से शुक्रवार, सुबह 9 बजे से शाम 5 बजे तक खुला रहता है।"
        ),
        "faculty": (
            "हमारे अनुभवी संकाय सदस्य गुणवत्तापूर्ण शिक्षा प्रदान करने के लिए समर्पित हैं। "
            "आप संबंधित विभाग अनुभागों में संकाय की जानकारी पा सकते हैं।"
        ),
        "default": (
            "सेंट कोलंबा कॉलेज के बारे में आपके प्रश्न के लिए धन्यवाद। विशिष्ट जानकारी के लिए, "
            "कृपया हमारी वेबसाइट के अनुभागों पर जाएं या सीधे हमारे कार्यालय से संपर्क करें।"
        ),
    },
}


class ChatbotService:
    """Answers chat widget messages with canned, topic-based replies."""

    def __init__(self, default_language: str = ENGLISH):
        self._default_language = self.resolve_language(default_language)

    @staticmethod
    def resolve_language(language: str | None) -> str:
        """Map a requested language onto a supported one (Hindi or English)."""
        if language is not None and language.strip().lower() == HINDI:
            return HINDI
        return ENGLISH

    @staticmethod
    def match_topic(message: str) -> str:
        text = message.lower()
        for topic, keywords in _RULES:
            if any(keyword in text for keyword in keywords):
                return topic
        return "default"

    def reply(self, message: str, language: str | None = None) -> ChatReply:
        if not message or not message.strip():
            raise ChatbotError("Message is required")

        lang = self.resolve_language(language) if language is not None else self._default_language
        topic = self.match_topic(message)
        logger.debug("Chat message matched topic '%s' (language=%s)", topic, lang)
        return ChatReply(reply=_RESPONSES[lang][topic], language=lang)

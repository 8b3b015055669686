"""Canned assistant texts."""

GREETING = (
    "Hello! I'm your MilkDirect AI assistant. I can help you with:\n\n"
    "• Finding the best milk sellers near you\n"
    "• Understanding different milk types (A2, Buffalo, Cow)\n"
    "• Delivery questions and order tracking\n"
    "• Tips for milk storage and freshness\n\n"
    "How can I help you today?"
)

FALLBACK_REPLY = (
    "I apologize, but I'm having trouble connecting right now. "
    "Please try again in a moment."
)

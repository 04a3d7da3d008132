"""Fixed lines the skill speaks."""

WELCOME_SPEECH = (
    "Welcome to Star Gazer. You can ask Star Gazer to tell you about a constellation "
    "by saying something like, tell me about ursa minor? ... Now, what can I help you with."
)
WELCOME_REPROMPT = "For instructions on what you can say, please say help me."

HELP_SPEECH = (
    "You can ask Star Gazer to tell you about a constellation. You can say, Alexa, ask "
    "Star Gazer to tell me about Ursa Minor, or, you can say, exit, to close the skill... "
    "Now, what can I help you with?"
)

STOP_SPEECH = "Enjoy the stars."

CANCEL_SPEECH = (
    "Sorry about that. I canceled that last action for you. Is there something else I can "
    "help you with. For help, say help."
)

NOT_FOUND_SPEECH = (
    "I'm sorry, I currently do not have information about that constellation, or I did not "
    "understand what you said. Try to repeat yourself, or for help, say help."
)

MORE_INFO_PROMPT = "Would you like to hear more?"

MYTH_FOLLOW_UP = "... I hope you enjoyed that myth. Is there anything else I can help you with?"
MYTH_REPROMPT = "Is there anything else can I help you with?"

NO_CONTEXT_SPEECH = (
    "I'm sorry, I don't know which constellation you'd like to hear more about. Try asking "
    "about a constellation first, for example, tell me about ursa minor."
)

UNHANDLED_INTENT_SPEECH = "Sorry, Star Gazer can't help with that. For help, say help."

INFO_CARD_SUFFIX = ": Information"
MYTH_CARD_SUFFIX = ": Myth"

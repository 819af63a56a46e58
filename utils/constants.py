"""
Constants for the Drink Session Bot.
"""

# Command tokens, matched as literal prefixes of the message text
COMMAND_PREFIXES = {
    "start": "/start",
    "suggest": "/suggest",
    "pick": "/pick",
    "showchoices": "/showchoices",
}

# Message Templates
MESSAGES = {
    "welcome": "Welcome to the Drink Session Bot!",
    "suggestion_added": "Suggestion '{suggestion}' added.",
    "no_choices": "No choices available yet.",
    "picked": "You picked {choice}.",
    "invalid_index": "Invalid choice index.",
    "choices_header": "Available choices:\n",
    "choice_line": "{index}. {choice}\n",
}

# Reply keyboard button label for a choice
PICK_BUTTON_TEMPLATE = "/pick {index}"

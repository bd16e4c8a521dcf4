"""User-facing message catalogue in English and German."""

from typing import Any

CATALOGUE: dict[str, dict[str, str]] = {
    "en": {
        "OptimizedNotification": "Coins of {name} exchanged: {gold} gold, {silver} silver, {copper} copper, {nickel} nickel",
        "InsufficientFunds": "Insufficient funds! The purse has been emptied.",
        "AlreadyOptimized": "The coins are already optimally sorted.",
        "ConfirmExchange": "Exchange all coins of {name} into the largest denominations?",
        "Welcome": "Exchange office active! Coins are now converted automatically.",
        "ShowNotifications": "Show notifications",
        "ShowNotificationsHint": "Show a message whenever coins are converted automatically.",
    },
    "de": {
        "OptimizedNotification": "Münzen von {name} gewechselt: {gold} Dukaten, {silver} Silber, {copper} Heller, {nickel} Kreuzer",
        "InsufficientFunds": "Nicht genug Geld! Die Geldbörse wurde geleert.",
        "AlreadyOptimized": "Die Münzen sind bereits optimal verteilt.",
        "ConfirmExchange": "Alle Münzen von {name} in die größtmöglichen Einheiten wechseln?",
        "Welcome": "Wechselstube aktiviert! Münzen werden jetzt automatisch umgerechnet.",
        "ShowNotifications": "Benachrichtigungen anzeigen",
        "ShowNotificationsHint": "Bei jeder automatischen Umrechnung eine Meldung anzeigen.",
    },
}

DEFAULT_LANGUAGE = "en"


class Messages:
    """Looks up and formats messages for one language.

    Keys missing from the chosen language fall back to English, and unknown
    keys are returned unchanged.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language if language in CATALOGUE else DEFAULT_LANGUAGE

    def localize(self, key: str) -> str:
        return CATALOGUE[self.language].get(key) or CATALOGUE[DEFAULT_LANGUAGE].get(key, key)

    def format(self, key: str, **data: Any) -> str:
        return self.localize(key).format(**data)

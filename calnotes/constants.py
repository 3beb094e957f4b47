"""Shared constants for calendar notes."""

# Canonical date key format (local calendar fields)
DATE_KEY_FORMAT = "%Y-%m-%d"

# 6 weeks x 7 days
GRID_SIZE = 42

WEEKDAY_LABELS = ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"]

MONTH_NAMES = [
    "Janvier",
    "Février",
    "Mars",
    "Avril",
    "Mai",
    "Juin",
    "Juillet",
    "Août",
    "Septembre",
    "Octobre",
    "Novembre",
    "Décembre",
]

# Long-form labels for note headers ("lundi 15 janvier 2024")
WEEKDAY_NAMES_LONG = [
    "lundi",
    "mardi",
    "mercredi",
    "jeudi",
    "vendredi",
    "samedi",
    "dimanche",
]

DEFAULT_NOTES_TABLE = "notes"

EMPTY_NOTE_MESSAGE = "Veuillez remplir le titre et le contenu"

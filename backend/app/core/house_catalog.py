"""House Catalog: static display metadata for the /houses view.

Unrelated to the character data: house filtering is resolved upstream, these
entries only drive colors and copy in the templates.
"""

from app.core.domain_types import House


HOUSES: tuple[House, ...] = (
    House("Gryffindor", "#7F0909", "#FFC500", "Lion", "Bravery, courage, determination."),
    House("Slytherin", "#0D6217", "#AAAAAA", "Serpent", "Ambition, cunning, leadership."),
    House("Hufflepuff", "#EEE117", "#000000", "Badger", "Loyalty, patience, fair play."),
    House("Ravenclaw", "#000A90", "#946B2D", "Eagle", "Wisdom, learning, creativity."),
)

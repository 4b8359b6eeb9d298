"""Western astrology calculations on top of pyswisseph."""

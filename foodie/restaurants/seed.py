"""
Sample restaurant data.

Usage:
    python -m foodie.restaurants.seed --output data/restaurants.json

Point ``FOODIE_RESTAURANTS_FILE`` at the written file to serve it instead of
the built-in samples.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..config import configure_logging
from .data_store import RestaurantStore
from .models import RestaurantCreate

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("data/restaurants.json")


def _week(weekday: tuple[str, str], friday: tuple[str, str], saturday: tuple[str, str],
          sunday: tuple[str, str] | None, thursday: tuple[str, str] | None = None) -> dict:
    def day(hours: tuple[str, str] | None) -> dict:
        if hours is None:
            return {"open": "", "close": "", "closed": True}
        return {"open": hours[0], "close": hours[1], "closed": False}

    return {
        "monday": day(weekday),
        "tuesday": day(weekday),
        "wednesday": day(weekday),
        "thursday": day(thursday or weekday),
        "friday": day(friday),
        "saturday": day(saturday),
        "sunday": day(sunday),
    }


SAMPLE_RESTAURANTS: list[dict] = [
    {
        "name": "Chez Laurent",
        "description": (
            "An authentic French bistro offering classic dishes with a modern twist. "
            "Our chef brings 20 years of experience from Lyon to create unforgettable dining experiences."
        ),
        "cuisine": "French",
        "priceRange": "fine-dining",
        "location": {
            "address": "123 Rue de la Paix",
            "city": "Paris",
            "coordinates": {"latitude": 48.8566, "longitude": 2.3522},
        },
        "images": [
            "https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=800",
            "https://images.unsplash.com/photo-1550966871-3ed3cdb5b958?w=800",
        ],
        "rating": 4.8,
        "reviewCount": 247,
        "features": ["Reservations", "Wine Bar", "Outdoor Seating", "Private Dining"],
        "openingHours": _week(("18:00", "23:00"), ("18:00", "24:00"), ("18:00", "24:00"), None),
        "contact": {
            "phone": "+33 1 42 86 87 88",
            "website": "https://chezlaurent.fr",
            "email": "info@chezlaurent.fr",
        },
    },
    {
        "name": "Sakura Sushi",
        "description": (
            "Fresh sushi and authentic Japanese cuisine in a modern setting. "
            "Our master sushi chef creates artful presentations using the finest ingredients."
        ),
        "cuisine": "Japanese",
        "priceRange": "mid-range",
        "location": {
            "address": "456 Cherry Blossom Ave",
            "city": "Tokyo",
            "coordinates": {"latitude": 35.6762, "longitude": 139.6503},
        },
        "images": [
            "https://images.unsplash.com/photo-1579952363873-27d3bfad9c0d?w=800",
            "https://images.unsplash.com/photo-1553621042-f6e147245754?w=800",
        ],
        "rating": 4.6,
        "reviewCount": 189,
        "features": ["Takeout", "Delivery", "Sake Bar", "Counter Seating"],
        "openingHours": _week(("17:00", "22:00"), ("17:00", "23:00"), ("12:00", "23:00"), ("12:00", "21:00")),
        "contact": {"phone": "+81 3 1234 5678", "website": "https://sakurasushi.jp"},
    },
    {
        "name": "Mama Mia Pizzeria",
        "description": (
            "Traditional wood-fired pizzas made with love and family recipes passed down for generations. "
            "Authentic Italian flavors in every bite."
        ),
        "cuisine": "Italian",
        "priceRange": "budget",
        "location": {
            "address": "789 Little Italy Street",
            "city": "New York",
            "coordinates": {"latitude": 40.7128, "longitude": -74.0060},
        },
        "images": [
            "https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b?w=800",
            "https://images.unsplash.com/photo-1574071318508-1cdbab80d002?w=800",
        ],
        "rating": 4.4,
        "reviewCount": 312,
        "features": ["Delivery", "Takeout", "Kids Friendly", "Outdoor Seating"],
        "openingHours": _week(("11:00", "23:00"), ("11:00", "24:00"), ("11:00", "24:00"), ("12:00", "22:00")),
        "contact": {"phone": "+1 212 555 0123", "website": "https://mamamiapizza.com"},
    },
    {
        "name": "Spice Garden",
        "description": (
            "Aromatic Indian cuisine featuring traditional spices and modern techniques. "
            "From mild kormas to fiery vindaloos, we cater to all palates."
        ),
        "cuisine": "Indian",
        "priceRange": "mid-range",
        "location": {
            "address": "321 Curry Lane",
            "city": "Mumbai",
            "coordinates": {"latitude": 19.0760, "longitude": 72.8777},
        },
        "images": [
            "https://images.unsplash.com/photo-1585937421612-70a008356fbe?w=800",
            "https://images.unsplash.com/photo-1565557623262-b51c2513a641?w=800",
        ],
        "rating": 4.5,
        "reviewCount": 156,
        "features": ["Vegetarian", "Vegan", "Delivery", "Catering", "WiFi"],
        "openingHours": _week(("12:00", "22:00"), ("12:00", "23:00"), ("12:00", "23:00"), ("12:00", "22:00")),
        "contact": {"phone": "+91 22 1234 5678", "email": "hello@spicegarden.in"},
    },
    {
        "name": "El Mariachi",
        "description": (
            "Vibrant Mexican cantina serving authentic street food and creative cocktails. "
            "Live mariachi music on weekends adds to the festive atmosphere."
        ),
        "cuisine": "Mexican",
        "priceRange": "budget",
        "location": {
            "address": "555 Fiesta Boulevard",
            "city": "Mexico City",
            "coordinates": {"latitude": 19.4326, "longitude": -99.1332},
        },
        "images": [
            "https://images.unsplash.com/photo-1565299585323-38174c14bd37?w=800",
            "https://images.unsplash.com/photo-1551504734-5ee1c4a1479b?w=800",
        ],
        "rating": 4.3,
        "reviewCount": 203,
        "features": ["Bar", "Live Music", "Outdoor Seating", "Late Night", "Kids Friendly"],
        "openingHours": _week(
            ("11:00", "23:00"), ("11:00", "02:00"), ("11:00", "02:00"), ("12:00", "22:00"),
            thursday=("11:00", "24:00"),
        ),
        "contact": {"phone": "+52 55 1234 5678", "website": "https://elmariachi.mx"},
    },
    {
        "name": "Green Bowl",
        "description": (
            "Fresh, healthy, and delicious vegetarian and vegan options. "
            "Locally sourced ingredients and sustainable practices make dining guilt-free."
        ),
        "cuisine": "Vegetarian",
        "priceRange": "mid-range",
        "location": {
            "address": "777 Health Street",
            "city": "San Francisco",
            "coordinates": {"latitude": 37.7749, "longitude": -122.4194},
        },
        "images": [
            "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=800",
            "https://images.unsplash.com/photo-1540420773420-3366772f4999?w=800",
        ],
        "rating": 4.7,
        "reviewCount": 128,
        "features": ["Vegan", "Vegetarian", "WiFi", "Outdoor Seating", "Takeout"],
        "openingHours": _week(("08:00", "21:00"), ("08:00", "22:00"), ("09:00", "22:00"), ("09:00", "20:00")),
        "contact": {
            "phone": "+1 415 555 0789",
            "website": "https://greenbowl.com",
            "email": "info@greenbowl.com",
        },
    },
]


def sample_restaurants() -> list[RestaurantCreate]:
    return [RestaurantCreate.model_validate(item) for item in SAMPLE_RESTAURANTS]


def run_seed(output: Path = DEFAULT_OUTPUT) -> Path:
    """Write the sample restaurants to ``output`` as a JSON document list."""
    store = RestaurantStore()
    store.insert_many(sample_restaurants())
    path = store.dump(output)
    logger.info("Wrote %d restaurants to %s", len(store), path)
    return path


def main() -> None:
    parser = argparse.ArgumentParser(description="Write sample restaurants to a JSON file")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Destination JSON file")
    args = parser.parse_args()

    configure_logging()
    run_seed(args.output)


if __name__ == "__main__":
    main()

# winway/catalog/data.py
"""Static venue catalogs: dress codes, entertainment, staff and form options."""

STAFF_TYPES = [
    {"key": "waiter", "label": "Waiter", "desc": "Drinks, menu, bill"},
    {"key": "technician", "label": "Technician", "desc": "Screens, sound, devices"},
    {"key": "cleaner", "label": "Cleaner", "desc": "Spills, table cleaning"},
    {"key": "security", "label": "Security", "desc": "Safety, conflict"},
    {"key": "host", "label": "Host", "desc": "Seating, general help"},
]

STAFF_LABELS = {s["key"]: s["label"] for s in STAFF_TYPES}

QUICK_REASONS = [
    "Need menu / drinks",
    "Technical issue",
    "Spill / cleaning",
    "Bill / payment",
    "Feeling unsafe",
    "Other",
]

TABLE_PRESETS = (
    [f"A{n}" for n in range(1, 13)]
    + [f"B{n}" for n in range(1, 9)]
    + ["VIP 1", "VIP 2", "VIP 3", "Lounge A", "Lounge B", "Lounge C", "Bar 1", "Bar 2", "Terrace"]
)

TICKET_TYPES = [
    {"key": "complaint", "label": "Complaint", "caption": "Report a problem or negative experience."},
    {"key": "suggestion", "label": "Suggestion", "caption": "Share an idea to improve the venue."},
    {"key": "compliment", "label": "Compliment", "caption": "Say thanks for a great service."},
]

TICKET_TYPE_LABELS = {t["key"]: t["label"] for t in TICKET_TYPES}

TICKET_CATEGORIES = [
    "Staff / Service",
    "Cleanliness",
    "Music / Sound",
    "Games / Slots",
    "Food & Drinks",
    "Other",
]

DRESS_CODES = {
    "elegant": {
        "key": "elegant",
        "title": "Elegant Sunday",
        "short_label": "Elegant",
        "subtitle": "Refined evening outfits",
        "hours": "Sunday · 18:00 – 03:00",
        "description": (
            "Refined, evening-appropriate outfits: clean lines, neat fabrics and "
            "well-polished shoes, as for dinner in a good restaurant."
        ),
        "allowed": [
            "Shirts, blouses, polos and light knitwear",
            "Trousers, chinos, elegant dark jeans without rips",
            "Dresses and skirts of appropriate length",
            "Closed shoes, loafers, heels or neat boots",
        ],
        "not_allowed": [
            "Sportswear and tracksuits",
            "Beachwear, flip-flops or sliders",
            "Ripped or heavily distressed clothing",
            "Caps, beanies or hoods up inside the venue",
        ],
        "tips": [
            "Neutral or dark colors always look safe.",
            "If unsure, go for a simple shirt and dark trousers.",
            "Outerwear can be left in the cloakroom.",
        ],
    },
    "smart": {
        "key": "smart",
        "title": "Smart Casual Night",
        "short_label": "Smart Casual",
        "subtitle": "Relaxed but neat style",
        "hours": "Monday – Friday · 19:00 – 04:00",
        "description": (
            "Comfort and style together. Relaxed is fine, but the look should stay "
            "clean and well put together."
        ),
        "allowed": [
            "Smart T-shirts, polos, shirts and blouses",
            "Dark jeans or chinos without rips",
            "Casual dresses and skirts",
            "Clean sneakers, loafers or boots",
        ],
        "not_allowed": [
            "Gym shorts, jerseys or active sportswear",
            "Very baggy or dirty clothing",
            "Beachwear, swimwear",
            "Flip-flops and house slippers",
        ],
        "tips": [
            "Jeans with a shirt or blouse works perfectly.",
            "Avoid large logos and offensive prints.",
            "Sneakers are fine if they look fresh.",
        ],
    },
    "neon": {
        "key": "neon",
        "title": "Neon Party Night",
        "short_label": "Neon Party",
        "subtitle": "Bright and bold looks",
        "hours": "Saturday · 21:00 – 05:00",
        "description": (
            "Bright, playful and bold. Colors, glowing details and creative outfits "
            "are welcome as long as they stay tasteful."
        ),
        "allowed": [
            "Neon tops, graphic T-shirts, shiny fabrics",
            "Dark jeans, leather trousers, skirts or shorts of appropriate length",
            "Comfortable party shoes or clean sneakers",
            "Accessories with neon or reflective elements",
        ],
        "not_allowed": [
            "Pure sportswear (training shorts, jerseys)",
            "Beachwear and swimwear",
            "Overly revealing or transparent outfits",
            "Dirty footwear or flip-flops",
        ],
        "tips": [
            "Add at least one neon or bright element.",
            "Wear shoes you can dance in.",
            "Skip costumes or masks that block visibility.",
        ],
    },
}

# Sunday first, matching the venue's printed week
WEEK = [
    {"id": "sun", "label": "Sun", "full": "Sunday", "code_key": "elegant"},
    {"id": "mon", "label": "Mon", "full": "Monday", "code_key": "smart"},
    {"id": "tue", "label": "Tue", "full": "Tuesday", "code_key": "smart"},
    {"id": "wed", "label": "Wed", "full": "Wednesday", "code_key": "smart"},
    {"id": "thu", "label": "Thu", "full": "Thursday", "code_key": "smart"},
    {"id": "fri", "label": "Fri", "full": "Friday", "code_key": "smart"},
    {"id": "sat", "label": "Sat", "full": "Saturday", "code_key": "neon"},
]

ENTERTAINMENT_TYPES = {"slot": "Slots", "live": "Live shows", "tournament": "Tournaments"}

ENTERTAINMENTS = [
    {
        "id": "thunderspin",
        "title": "Thunder Spin",
        "type": "slot",
        "type_label": "Slot machine",
        "tag": "High-volatility · Featured",
        "time": "Available all night",
        "min_bet": "From 1 credit",
        "is_new": True,
        "is_tonight": True,
        "description": "Fast-paced slot with electric visuals, stacked wilds and bonus lightning rounds.",
        "tips": [
            "Decide your budget before you start and stick to it.",
            "Take breaks between sessions.",
        ],
    },
    {
        "id": "live_show_a",
        "title": "Live Show A",
        "type": "live",
        "type_label": "Live show",
        "tag": "Main stage · Tonight",
        "time": "22:00 – 23:30",
        "min_bet": None,
        "is_new": False,
        "is_tonight": True,
        "description": "Live performance with music, light effects and audience interaction.",
        "tips": ["Seats near the stage fill up early.", "Sound can feel loud close to the stage."],
    },
    {
        "id": "slot_classic",
        "title": "Golden Classic",
        "type": "slot",
        "type_label": "Slot machine",
        "tag": "Classic reels",
        "time": "Available until 04:00",
        "min_bet": "From 0.5 credit",
        "is_new": False,
        "is_tonight": True,
        "description": "Traditional three-reel play with a modern neon touch, ideal for relaxed sessions.",
        "tips": [],
    },
    {
        "id": "spin1",
        "title": "Beach Paradise",
        "type": "slot",
        "type_label": "Slot machine",
        "tag": "Tropical vibes",
        "time": "Available all night",
        "min_bet": "From 1 credit",
        "is_new": False,
        "is_tonight": True,
        "description": "Tropical slot with palm trees and ocean waves.",
        "tips": [],
    },
    {
        "id": "spin2",
        "title": "Sunset Waves",
        "type": "slot",
        "type_label": "Slot machine",
        "tag": "Ocean breeze",
        "time": "Available all night",
        "min_bet": "From 1 credit",
        "is_new": False,
        "is_tonight": True,
        "description": "Relaxing sunset-themed slot with refreshing bonus rounds.",
        "tips": [],
    },
    {
        "id": "spin3",
        "title": "Coconut Island",
        "type": "slot",
        "type_label": "Slot machine",
        "tag": "Island treasure",
        "time": "Available all night",
        "min_bet": "From 1 credit",
        "is_new": False,
        "is_tonight": True,
        "description": "Island adventure with hidden treasures and tropical jackpots.",
        "tips": [],
    },
    {
        "id": "tournament_blackjack",
        "title": "Blackjack Tournament",
        "type": "tournament",
        "type_label": "Tournament",
        "tag": "Seats limited",
        "time": "Starts at 23:00",
        "min_bet": "Buy-in at desk",
        "is_new": True,
        "is_tonight": True,
        "description": "Structured blackjack tournament for players who enjoy strategy and competition.",
        "tips": ["Register at the desk before 22:45."],
    },
]

# Picks offered on the My Night planner
MY_NIGHT_PICKS = ["thunderspin", "live_show_a"]

_EVENING = "Evening (18:00 - 02:00)"
_WEEKDAYS = [True, True, True, True, True, False, False]  # Mon..Sun

STAFF_MEMBERS = [
    {
        "id": 1,
        "name": "Jack Foster",
        "years": 3,
        "role": "DEALER",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["Blackjack", "Poker", "Roulette"],
        "languages": ["English", "Spanish"],
        "shift": _EVENING,
    },
    {
        "id": 2,
        "name": "Emily Newton",
        "years": 3,
        "role": "DEALER",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["Baccarat", "Blackjack", "Customer Relations"],
        "languages": ["English", "French"],
        "shift": _EVENING,
    },
    {
        "id": 3,
        "name": "Lucas Hayes",
        "years": 3,
        "role": "DEALER",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["Poker", "Texas Hold'em", "Tournament Management"],
        "languages": ["English"],
        "shift": _EVENING,
    },
    {
        "id": 4,
        "name": "Grace Carter",
        "years": 3,
        "role": "DEALER",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["Roulette", "Blackjack", "Entertainment"],
        "languages": ["English", "Italian"],
        "shift": _EVENING,
    },
    {
        "id": 5,
        "name": "Henry Mitchell",
        "years": 3,
        "role": "DEALER",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["All Table Games", "High Stakes", "Training"],
        "languages": ["English", "German"],
        "shift": _EVENING,
    },
    {
        "id": 6,
        "name": "Marcus Rodriguez",
        "years": 3,
        "role": "SECURITY",
        "rating": 5,
        "schedule": _WEEKDAYS,
        "specialties": ["Crowd Control", "Surveillance", "Emergency Response"],
        "languages": ["English", "Spanish"],
        "shift": _EVENING,
    },
]

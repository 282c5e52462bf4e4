from __future__ import annotations

from landedcost.costing.priors import CategoryKey

# Table order is significant: it breaks ties between equally scored categories.
CATEGORIES = {
    CategoryKey.TOY: {
        "aliases": ["toy", "toys", "games", "toys_games", "toys_and_games", "kids", "collectibles"],
        "chapters": [95],
        "keywords": [
            "toy", "figure", "collectible", "blind box", "capsule", "game", "puzzle",
            "slime", "doll", "action figure", "plush", "building block", "lego",
        ],
    },
    CategoryKey.FOOD: {
        "aliases": [
            "food", "foods", "snack", "snacks", "candy", "confectionery", "beverage",
            "beverages", "grocery", "food_beverage", "food_and_beverage",
        ],
        "chapters": [4, 8, 9, 16, 17, 18, 19, 20, 21, 22],
        "keywords": [
            "candy", "confectionery", "gummy", "jelly", "marshmallow", "chocolate",
            "lollipop", "gum", "snack", "sweet", "toffee", "caramel", "cookie",
            "biscuit", "beverage", "drink", "tea", "coffee", "sauce", "noodle",
        ],
    },
    CategoryKey.HYBRID: {
        "aliases": ["hybrid", "candy_toy", "toy_candy", "novelty_candy"],
        "chapters": [],
        "keywords": ["candy toy", "toy candy"],
    },
    CategoryKey.ELECTRONICS: {
        "aliases": ["electronics", "electronic", "consumer_electronics", "tech", "gadgets"],
        "chapters": [85, 90],
        "keywords": [
            "usb", "rechargeable", "battery", "charger", "led", "adapter", "cable",
            "plug", "connector", "electronic", "electric", "wireless", "bluetooth",
            "speaker", "headphones", "phone",
        ],
    },
    CategoryKey.APPAREL: {
        "aliases": ["apparel", "clothing", "fashion", "garments", "textiles", "footwear"],
        "chapters": [61, 62, 63, 64, 65],
        "keywords": [
            "cotton", "polyester", "shirt", "t-shirt", "socks", "hoodie", "jacket",
            "fabric", "garment", "dress", "pants", "sweater", "shoes",
        ],
    },
    CategoryKey.BEAUTY: {
        "aliases": ["beauty", "cosmetics", "cosmetic", "personal_care", "skincare", "makeup"],
        "chapters": [33, 34],
        "keywords": [
            "cosmetic", "skincare", "makeup", "lotion", "cream", "serum", "shampoo",
            "perfume", "lipstick", "mascara",
        ],
    },
    CategoryKey.HOME_KITCHEN: {
        "aliases": ["home_kitchen", "home", "kitchen", "home_and_kitchen", "household", "home_decor"],
        "chapters": [39, 69, 70],
        "keywords": [
            "kitchen", "cookware", "mug", "cup", "plate", "bowl", "decor", "household",
            "storage box", "utensil", "bottle",
        ],
    },
    CategoryKey.FURNITURE: {
        "aliases": ["furniture", "furnishings"],
        "chapters": [94],
        "keywords": ["chair", "table", "sofa", "cabinet", "shelf", "desk", "bed frame", "stool"],
    },
    CategoryKey.HARDWARE: {
        "aliases": ["hardware", "tools", "diy", "home_improvement"],
        "chapters": [73, 82, 83],
        "keywords": ["screw", "bolt", "nut", "hinge", "wrench", "hammer", "drill bit", "tool", "fastener"],
    },
    CategoryKey.CHEMICAL: {
        "aliases": ["chemical", "chemicals", "cleaning", "cleaning_supplies"],
        "chapters": [28, 29, 32, 38],
        "keywords": ["chemical", "solvent", "adhesive", "glue", "detergent", "cleaner", "paint", "resin"],
    },
    CategoryKey.PACKAGING: {
        "aliases": ["packaging", "packaging_materials"],
        "chapters": [],
        "keywords": ["packaging", "carton", "mailer", "pouch", "bag", "label", "box", "wrap"],
    },
    CategoryKey.INDUSTRIAL_PARTS: {
        "aliases": ["industrial_parts", "industrial", "machinery", "equipment", "parts"],
        "chapters": [84, 87],
        "keywords": ["industrial", "machinery", "pump", "valve", "bearing", "gear", "motor", "pipe", "fitting"],
    },
    CategoryKey.JEWELRY_ACCESSORIES: {
        "aliases": ["jewelry_accessories", "jewelry", "jewellery", "accessories"],
        "chapters": [42, 71],
        "keywords": ["necklace", "bracelet", "earring", "ring", "pendant", "keychain", "wallet", "sunglasses"],
    },
    CategoryKey.STATIONERY_OFFICE: {
        "aliases": ["stationery_office", "stationery", "office", "office_supplies"],
        "chapters": [48, 49, 96],
        "keywords": ["pen", "pencil", "notebook", "sticker", "paper", "stapler", "marker", "eraser"],
    },
    CategoryKey.PET: {
        "aliases": ["pet", "pets", "pet_supplies"],
        "chapters": [23],
        "keywords": ["pet", "dog", "cat", "leash", "collar", "litter", "pet food"],
    },
}

# Starter catalog loaded by `flask seed-products`
SEED_PRODUCTS = [
    # --- BATS ---
    {"title": "SG HP33 Kashmir Willow", "price": 4999, "originalPrice": 6999, "category": "bats", "brand": "sg", "image": "images/SS.png", "rating": 4.5, "reviews": 125, "isBestSeller": True, "description": "Hand-crafted Kashmir Willow bat."},
    {"title": "Kookaburra Kahuna Pro", "price": 8999, "originalPrice": 10999, "category": "bats", "brand": "kookaburra", "image": "images/Kookabura.png", "rating": 5, "reviews": 89, "isNewArrival": True, "description": "The iconic Kahuna. Mid-blade sweet spot for all-round stroke play."},
    {"title": "SS Ton Retro Classic", "price": 11500, "originalPrice": 13999, "category": "bats", "brand": "ss", "image": "images/ssretro.png", "rating": 4.8, "reviews": 45, "description": "Grade 1 English Willow. Huge edges and massive power."},
    {"title": "MRF Grand Edition", "price": 22000, "originalPrice": 24999, "category": "bats", "brand": "mrf", "image": "images/mrf.png", "rating": 5, "reviews": 32, "description": "Premium English Willow with lightweight pickup."},
    {"title": "Gray-Nicolls Cobra", "price": 7499, "originalPrice": 9999, "category": "bats", "brand": "gray-nicolls", "image": "images/grayniccols.png", "rating": 4.6, "reviews": 67, "description": "Low-profile sweet spot, perfect for front-foot drives."},
    # --- BALLS ---
    {"title": "SG Test Cricket Ball", "price": 899, "originalPrice": 1199, "category": "balls", "brand": "sg", "image": "images/sgred.png", "rating": 5, "reviews": 78, "isBestSeller": True, "description": "Official Test match ball. High-quality alum tanned leather."},
    {"title": "Kookaburra Turf White", "price": 1299, "originalPrice": 1699, "category": "balls", "brand": "kookaburra", "image": "images/kookaburaball.png", "rating": 5, "reviews": 156, "description": "Regulation white ball for T20/ODI cricket. Excellent swing."},
    {"title": "Heavy Tennis Ball (Pack of 5)", "price": 540, "originalPrice": 720, "category": "balls", "brand": "dsc", "image": "images/tball.png", "rating": 4.5, "reviews": 500, "description": "Heavy duty tennis balls for box cricket."},
    # --- PADS / GLOVES / HELMETS ---
    {"title": "Kookaburra Batting Pads", "price": 2999, "originalPrice": 3999, "category": "pads", "brand": "kookaburra", "image": "images/pads.png", "rating": 4, "reviews": 92, "description": "Lightweight foam pads with traditional cane protection."},
    {"title": "Moonwalkr Thigh Pad Combo", "price": 2800, "originalPrice": 3200, "category": "pads", "brand": "moonwalkr", "image": "images/mthighpad.jpg", "rating": 4.9, "reviews": 110, "isBestSeller": True, "description": "Futuristic slim design. Integrated inner/outer thigh guard."},
    {"title": "BAS Vampire Batting Gloves", "price": 1999, "originalPrice": 2499, "category": "gloves", "brand": "bas", "image": "images/gloves.png", "rating": 5, "reviews": 145, "isBestSeller": True, "description": "Classic batting gloves with sausage finger protection."},
    {"title": "Shrey Master Class Air", "price": 5500, "originalPrice": 6500, "category": "helmets", "brand": "shrey", "image": "images/shhelmet.png", "rating": 4.9, "reviews": 45, "isNewArrival": True, "description": "Lightweight titanium grille. Choice of international pros."},
    # --- SHOES / BAGS / ACCESSORIES ---
    {"title": "Adidas Vector Mid", "price": 8999, "originalPrice": 12999, "category": "shoes", "brand": "adidas", "image": "images/ashoes.png", "rating": 5, "reviews": 120, "description": "Premium bowling spikes used by fast bowlers worldwide."},
    {"title": "SS Duffle Bag Pro", "price": 2499, "originalPrice": 3299, "category": "bags", "brand": "ss", "image": "images/duffle.jpg", "rating": 4.4, "reviews": 88, "isBestSeller": True, "description": "Modern backpack style duffle bag with shoe compartment."},
    {"title": "Premium Bat Grips (3 Pack)", "price": 299, "originalPrice": 450, "category": "accessories", "brand": "sg", "image": "images/grips.png", "rating": 5, "reviews": 234, "isBestSeller": True, "description": "High traction octopus grips in assorted colors."},
    {"title": "Fiber Tape", "price": 150, "originalPrice": 200, "category": "accessories", "brand": "generic", "image": "images/tape.jpg", "rating": 4.2, "reviews": 110, "description": "Strong fiber tape for bat repair and protection."},
    # --- KITS ---
    {"title": "BAS Players Complete Kit", "price": 12999, "originalPrice": 18999, "category": "kits", "brand": "bas", "image": "images/baskit.png", "rating": 4.5, "reviews": 89, "isNewArrival": True, "description": "Full kit including Bat, Pads, Gloves, Helmet, and Bag."},
    {"title": "SG Junior Cricket Kit", "price": 6999, "originalPrice": 8999, "category": "kits", "brand": "sg", "image": "images/junior.png", "rating": 4.8, "reviews": 210, "description": "Perfect starter kit for ages 10-14. Includes Kashmir willow bat."},
]

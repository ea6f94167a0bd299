"""
Sample catalog cho PersonaCart demo.

Mỗi tuple: (id, name, category, price, sizes, gender, brand).
Personal-care products không có sizes.
"""

SAMPLE_PRODUCTS = [
    ("p1", "Men's Cotton T-Shirt", "clothing", 24.99, ["S", "M", "L", "XL"], "Male", "Generic Brand"),
    ("p2", "Women's Blouse", "clothing", 39.99, ["XS", "S", "M", "L"], "Female", "Fashion Brand"),
    ("p3", "Kids Summer Dress", "clothing", 19.99, ["2T", "3T", "4T", "5T"], "Female", "Kids Fashion"),
    ("p4", "Men's Running Shoes", "footwear", 79.99, ["8", "9", "10", "11", "12"], "Male", "Sports Brand"),
    ("p5", "Women's Sandals", "footwear", 34.99, ["6", "7", "8", "9"], "Female", "Summer Style"),
    ("p6", "Kids Sneakers", "footwear", 29.99, ["1", "2", "3", "4"], "Unisex", "Kids Comfort"),
    ("p7", "Dove Men+Care Body Wash", "personal-care", 8.99, None, "Male", "Dove"),
    ("p8", "Nivea Women's Body Lotion", "personal-care", 12.99, None, "Female", "Nivea"),
    ("p9", "Johnson & Johnson Baby Shampoo", "personal-care", 6.99, None, "Unisex", "Johnson & Johnson"),
    ("p10", "Head & Shoulders Anti-Dandruff", "personal-care", 9.99, None, "Unisex", "Head & Shoulders"),
    ("p11", "Pantene Pro-V Shampoo", "personal-care", 11.99, None, "Female", "Pantene"),
    ("p12", "Old Spice Deodorant", "personal-care", 7.99, None, "Male", "Old Spice"),
]

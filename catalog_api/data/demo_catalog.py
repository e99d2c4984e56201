"""Canonical demo catalog used by the seed utility."""

from decimal import Decimal

# Tiny placeholder JPEG shared by every demo product
PLACEHOLDER_IMAGE_BASE64 = (
    "/9j/4AAQSkZJRgABAQEASABIAAD/4gHYSUNDX1BST0ZJTEUAAQEAAAHIAAAAAAQwAABtbnRy"
    "UkdCIFhZWiAH4AABAAEAAAAAAABhY3NwAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAQAA"
    "9tYAAQAAAADTLQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAlkZXNjAAAA8AAAACRyWFlaAAABFAAAABRnWFlaAAABKAAAABRiWFlaAAABPAAA"
    "ABR3dHB0AAABUAAAABRyVFJDAAABZAAAAChnVFJDAAABZAAAAChiVFJDAAABZAAAAChjcHJ0"
    "AAABjAAAADxtbHVjAAAAAAAAAAEAAAAMZW5VUwAAAAgAAAAcAHMAUgBHAEJYWVogAAAAAAAA"
    "b6IAADj1AAADkFhZWiAAAAAAAABimQAAt4UAABjaWFlaIAAAAAAAACSgAAAPhAAAts9YWVog"
    "AAAAAAAA9tYAAQAAAADTLXBhcmEAAAAAAAQAAAACZmYAAPKnAAANWQAAE9AAAApbAAAAAAAA"
    "AABtbHVjAAAAAAAAAAEAAAAMZW5VUwAAACAAAAAcAEcAbwBvAGcAbABlACAASQBuAGMALgAg"
    "ADIAMAAxADb/2wBDABQODxIPDRQSEBIXFRQdHx4eHRoaHSQtJSEkMjU1LS0yMi4qLjgyPj4+"
    "Oj4+Oj4+Oj4+Oj4+Oj4+Oj4+Oj7/2wBDAR4eHh4eHh4eHh4eHh4eHh4eHh4eHh4eHh4eHh4e"
    "Hh4eHh4eHh4eHh4eHh4eHh4eHh4eHh4eHh4eHh7/wAARCAAIAAoDASIAAhEBAxEB/8QAFQAB"
    "AQAAAAAAAAAAAAAAAAAAAAb/xAAUEAEAAAAAAAAAAAAAAAAAAAAA/8QAFQEBAQAAAAAAAAAA"
    "AAAAAAAAAAX/xAAUEQEAAAAAAAAAAAAAAAAAAAAA/9oADAMBAAIRAxEAPwCdABmX/9k="
)
PLACEHOLDER_IMAGE_CONTENT_TYPE = "image/jpeg"

CATEGORIES = [
    {"name": "Electronics", "description": "Electronic devices and accessories"},
    {"name": "Clothing", "description": "Apparel and fashion items"},
    {"name": "Books", "description": "Books and publications"},
    {"name": "Home & Garden", "description": "Home improvement and garden supplies"},
]

# Attributes attached to every category
SHARED_ATTRIBUTES = [
    {"name": "Brand", "description": "Product manufacturer or brand name"},
    {"name": "Color", "description": "Product color"},
    {"name": "Material", "description": "Main material used"},
]

# Category name -> attributes specific to it
CATEGORY_ATTRIBUTES = {
    "Electronics": [
        {"name": "Screen Size", "description": "Display size in inches"},
        {"name": "Storage", "description": "Storage capacity"},
        {"name": "RAM", "description": "Memory size"},
    ],
    "Clothing": [
        {"name": "Size", "description": "Product size"},
        {"name": "Gender", "description": "Target gender"},
        {"name": "Season", "description": "Suitable season"},
    ],
    "Books": [
        {"name": "Author", "description": "Book author"},
        {"name": "Genre", "description": "Book genre"},
        {"name": "Format", "description": "Book format"},
    ],
    "Home & Garden": [
        {"name": "Room", "description": "Intended room"},
        {"name": "Usage", "description": "Product usage"},
        {"name": "Dimensions", "description": "Product dimensions"},
    ],
}

# Attribute name -> curated values
ATTRIBUTE_VALUES = {
    "Brand": ["Samsung", "Apple", "Nike", "Adidas"],
    "Color": ["Black", "White", "Red", "Blue"],
    "Size": ["S", "M", "L", "XL"],
    "Genre": ["Fiction", "Non-Fiction", "Science Fiction", "Mystery"],
}

# "attributes" entries are (attribute name, value) pairs to link
PRODUCTS = [
    {
        "name": "iPhone 13 Pro",
        "description": "Latest Apple iPhone with advanced camera system",
        "price": Decimal("999.99"),
        "stock_quantity": 50,
        "category": "Electronics",
        "is_recommended": True,
        "attributes": [("Brand", "Apple"), ("Color", "Black")],
    },
    {
        "name": "Samsung Galaxy S21",
        "description": "Powerful Android smartphone with amazing display",
        "price": Decimal("899.99"),
        "stock_quantity": 45,
        "category": "Electronics",
        "is_recommended": True,
        "attributes": [("Brand", "Samsung"), ("Color", "White")],
    },
    {
        "name": "MacBook Pro M1",
        "description": "High-performance laptop with M1 chip",
        "price": Decimal("1299.99"),
        "stock_quantity": 30,
        "category": "Electronics",
        "is_recommended": False,
    },
    {
        "name": "Nike Air Max",
        "description": "Comfortable running shoes with air cushioning",
        "price": Decimal("129.99"),
        "stock_quantity": 100,
        "category": "Clothing",
        "is_recommended": True,
        "attributes": [("Brand", "Nike"), ("Color", "Black"), ("Size", "S")],
    },
    {
        "name": "Adidas T-Shirt",
        "description": "Classic cotton t-shirt with Adidas logo",
        "price": Decimal("29.99"),
        "stock_quantity": 200,
        "category": "Clothing",
        "is_recommended": False,
        "attributes": [("Brand", "Adidas"), ("Color", "White"), ("Size", "M")],
    },
    {
        "name": "Levi's 501 Jeans",
        "description": "Classic straight-leg jeans",
        "price": Decimal("59.99"),
        "stock_quantity": 75,
        "category": "Clothing",
        "is_recommended": True,
    },
    {
        "name": "The Great Gatsby",
        "description": "Classic novel by F. Scott Fitzgerald",
        "price": Decimal("14.99"),
        "stock_quantity": 50,
        "category": "Books",
        "is_recommended": True,
        "attributes": [("Genre", "Fiction")],
    },
    {
        "name": "To Kill a Mockingbird",
        "description": "Harper Lee's masterpiece",
        "price": Decimal("12.99"),
        "stock_quantity": 40,
        "category": "Books",
        "is_recommended": False,
    },
    {
        "name": "1984",
        "description": "George Orwell's dystopian classic",
        "price": Decimal("9.99"),
        "stock_quantity": 60,
        "category": "Books",
        "is_recommended": True,
        "attributes": [("Genre", "Non-Fiction")],
    },
    {
        "name": "Modern Sofa",
        "description": "Comfortable 3-seater sofa",
        "price": Decimal("799.99"),
        "stock_quantity": 10,
        "category": "Home & Garden",
        "is_recommended": True,
    },
    {
        "name": "Garden Tool Set",
        "description": "Complete set of gardening tools",
        "price": Decimal("49.99"),
        "stock_quantity": 25,
        "category": "Home & Garden",
        "is_recommended": False,
    },
    {
        "name": "Smart LED Bulbs",
        "description": "WiFi-enabled LED light bulbs",
        "price": Decimal("39.99"),
        "stock_quantity": 100,
        "category": "Home & Garden",
        "is_recommended": True,
    },
]

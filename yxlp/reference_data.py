"""Fixed reference tables the entity generators sample from."""

from __future__ import annotations

from .models import ProductColor, ProductSize, SizeMeasurements


CATEGORIES = [
    "shirts", "pants", "dresses", "jackets", "accessories", "shoes", "underwear", "sportswear",
]

BRANDS = [
    "YXLP Premium", "Fashion Forward", "Urban Style", "Classic Wear", "Modern Threads",
    "Elite Fashion", "Trendy Basics", "Luxury Line", "Casual Comfort", "Professional Wear",
]

COLORS = [
    ProductColor(name="Black", code="#000000"),
    ProductColor(name="White", code="#FFFFFF"),
    ProductColor(name="Navy Blue", code="#000080"),
    ProductColor(name="Red", code="#FF0000"),
    ProductColor(name="Green", code="#008000"),
    ProductColor(name="Gray", code="#808080"),
    ProductColor(name="Brown", code="#A52A2A"),
    ProductColor(name="Pink", code="#FFC0CB"),
    ProductColor(name="Purple", code="#800080"),
    ProductColor(name="Orange", code="#FFA500"),
]

SIZES = [
    ProductSize(name="XS", measurements=SizeMeasurements(chest=32, waist=26, length=24)),
    ProductSize(name="S", measurements=SizeMeasurements(chest=36, waist=30, length=26)),
    ProductSize(name="M", measurements=SizeMeasurements(chest=40, waist=34, length=28)),
    ProductSize(name="L", measurements=SizeMeasurements(chest=44, waist=38, length=30)),
    ProductSize(name="XL", measurements=SizeMeasurements(chest=48, waist=42, length=32)),
    ProductSize(name="XXL", measurements=SizeMeasurements(chest=52, waist=46, length=34)),
]

MATERIALS = [
    "Cotton", "Polyester", "Silk", "Wool", "Linen", "Denim", "Leather", "Cashmere", "Bamboo", "Modal",
]

PRODUCT_TAGS = ["trendy", "comfortable", "durable", "stylish", "premium", "casual", "formal"]

COUNTRIES = [
    "United States", "Canada", "United Kingdom", "Germany", "France", "Spain", "Italy",
    "Australia", "Japan", "South Korea", "Brazil", "Mexico", "Netherlands", "Sweden",
]

FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Lisa", "William", "Jennifer",
    "James", "Mary", "Christopher", "Patricia", "Daniel", "Linda", "Matthew", "Elizabeth", "Anthony", "Barbara",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
]

COMPANY_NAMES = [
    "Fashion Retail Group", "Style Boutique", "Urban Fashion Co.", "Trendy Threads Ltd.",
    "Classic Clothing Inc.", "Modern Apparel", "Elite Fashion House", "Casual Wear Co.",
    "Professional Attire", "Luxury Fashion Brand",
]

STREET_NAMES = ["Main", "Oak", "Pine", "Elm", "Maple"]
CITIES = ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix"]
STATES = ["NY", "CA", "IL", "TX", "AZ"]

# Generated orders only ever use this subset of the order lifecycle.
ORDER_STATUSES = ["pending", "confirmed", "processing", "shipped", "delivered"]
PAYMENT_STATUSES = ["pending", "paid", "failed"]
PAYMENT_METHODS = ["credit_card", "paypal", "bank_transfer"]

TAX_RATE = 0.08
FREE_SHIPPING_THRESHOLD = 100
FLAT_SHIPPING = 15

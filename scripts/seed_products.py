"""Insert a few sample products for manual testing.

Usage: python scripts/seed_products.py

Does nothing when the products table already has rows.
"""
from datetime import date

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from inventory_api.core.config import settings
from inventory_api.db import models

SAMPLE_PRODUCTS = [
    {"name": "Son Goku Super Saiyan Figure", "category": "Figure", "price": 59.99, "stock": 25,
     "supplier": "Bandai Spirits", "min_stock": 5, "last_restock_date": date(2024, 4, 10)},
    {"name": "One Piece Vol. 1", "category": "Manga", "price": 9.95, "stock": 3,
     "supplier": "Viz Media", "min_stock": 10, "last_restock_date": date(2024, 3, 2)},
    {"name": "Evangelion Unit-01 Poster", "category": "Poster", "price": 14.5, "stock": 40,
     "supplier": None, "min_stock": None, "last_restock_date": None},
    {"name": "Totoro Keychain", "category": "Accessory", "price": 4.99, "stock": 0,
     "supplier": "Studio Ghibli Store", "min_stock": 15, "last_restock_date": date(2024, 1, 20)},
]


def main():
    engine = create_engine(settings.DATABASE_URL)
    models.Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        if session.query(models.Product).count():
            print("Products table is not empty, skipping seed")
            return
        session.add_all(models.Product(**data) for data in SAMPLE_PRODUCTS)
        session.commit()
        print(f"Inserted {len(SAMPLE_PRODUCTS)} products")
    finally:
        session.close()


if __name__ == "__main__":
    main()

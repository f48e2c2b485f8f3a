from sqlalchemy import CheckConstraint, Column, Date, Float, Integer, String

from inventory_api.db.database import Base


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    supplier = Column(String(200), nullable=True)
    min_stock = Column(Integer, nullable=True)  # alert threshold, null = no alerting
    last_restock_date = Column(Date, nullable=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("min_stock IS NULL OR min_stock >= 0", name="ck_products_min_stock_non_negative"),
    )

    def __repr__(self):
        return f"<Product id={self.id} name={self.name!r} stock={self.stock}>"

from sqlalchemy import CheckConstraint, Column, Integer, String, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class OrderORM(Base):
    """Order ORM model."""
    __tablename__ = 'orders'
    __table_args__ = (CheckConstraint('amount >= 0', name='ck_orders_amount'),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float, nullable=False)


class ProductORM(Base):
    """Product ORM model."""
    __tablename__ = 'products'
    __table_args__ = (CheckConstraint('price >= 0', name='ck_products_price'),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)

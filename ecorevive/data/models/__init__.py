from ecorevive.data.models.user import UserModel
from ecorevive.data.models.product import ProductModel
from ecorevive.data.models.cart_item import CartItemModel
from ecorevive.data.models.order import OrderModel
from ecorevive.data.models.order_item import OrderItemModel

__all__ = ["UserModel", "ProductModel", "CartItemModel", "OrderModel", "OrderItemModel"]

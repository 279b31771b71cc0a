from product_service.models.product import Base, Product

__all__ = ["Base", "Product"]

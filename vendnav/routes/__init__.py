# vendnav/routes/__init__.py
from vendnav.routes.vending import create_vending_blueprint

__all__ = ["create_vending_blueprint"]

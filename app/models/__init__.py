from app.models.property import Property

__all__ = ["Property"]

"""Image storage clients."""

from .image_store import CloudinaryImageStore, ImageStore

__all__ = ['CloudinaryImageStore', 'ImageStore']

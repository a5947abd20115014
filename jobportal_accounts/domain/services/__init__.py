from .media_uploader import MediaUploader

__all__ = ["MediaUploader"]

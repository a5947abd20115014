"""
Shared constants for media uploads.

Used by the register and update-profile use cases and by the media host
client. Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Resource types understood by the media host
# -----------------------------------------------------------------------------
IMAGE_RESOURCE_TYPE = "image"
RAW_RESOURCE_TYPE = "raw"
PUBLIC_ACCESS_MODE = "public"

# -----------------------------------------------------------------------------
# Delivery URL rewriting (resumes open inline instead of downloading)
# -----------------------------------------------------------------------------
UPLOAD_PATH_SEGMENT = "/upload/"
INLINE_UPLOAD_PATH_SEGMENT = "/upload/fl_attachment:false/"

DEFAULT_MIME_TYPE = "application/octet-stream"

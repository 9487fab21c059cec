"""Enums shared by models and schemas."""
import enum


class FileType(str, enum.Enum):
    """Media type of a file."""
    image = "image"
    video = "video"
    live_photo = "live_photo"
    other = "other"


class FilterType(str, enum.Enum):
    """Categories of hierarchical search filters."""
    album = "album"
    file_type = "file_type"
    location = "location"
    contacts = "contacts"
    face = "face"
    magic = "magic"
    top_level_generic = "top_level_generic"
    only_them = "only_them"

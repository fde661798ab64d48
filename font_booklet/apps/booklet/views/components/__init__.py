from .font_list_view import FontListView

__all__ = ["FontListView"]

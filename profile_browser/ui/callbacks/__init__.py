from .callbacks_controls import register_control_callbacks
from .callbacks_links import register_link_callbacks
from .callbacks_render import register_render_callbacks

__all__ = ["register_control_callbacks", "register_link_callbacks", "register_render_callbacks"]

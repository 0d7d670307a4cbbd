from setup_ui.web.widgets.tab import IconClass, ImageIcon, Tab, TabProperties
from setup_ui.web.widgets.tabs import Tabs

__all__ = ["IconClass", "ImageIcon", "Tab", "TabProperties", "Tabs"]

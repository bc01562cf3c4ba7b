"""Menu tree, permission resolution and menu store."""

from oripro_dashboard.menu.models import (
    DEFAULT_ICON,
    FALLBACK_NAVIGATION,
    GROUP_URL,
    Capabilities,
    Icon,
    MenuNode,
    MenuTreeError,
    flatten_leaves,
    iter_nodes,
    menu_titles_by_url,
    parse_menu_tree,
    resolve_icon,
)
from oripro_dashboard.menu.resolver import find_menu_node, resolve_capabilities
from oripro_dashboard.menu.store import MenuTreeState, MenuTreeStore, with_manage_menus_entry

__all__ = [
    # Models
    'MenuNode',
    'Capabilities',
    'Icon',
    'DEFAULT_ICON',
    'GROUP_URL',
    'FALLBACK_NAVIGATION',
    'MenuTreeError',
    'resolve_icon',
    'parse_menu_tree',
    'iter_nodes',
    'flatten_leaves',
    'menu_titles_by_url',
    # Resolver
    'find_menu_node',
    'resolve_capabilities',
    # Store
    'MenuTreeStore',
    'MenuTreeState',
    'with_manage_menus_entry',
]

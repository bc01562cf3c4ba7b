"""
권한 해석기

현재 경로와 메뉴 트리로부터 페이지의 작업 권한(추가/수정/삭제 버튼 표시)을 계산합니다.
"""

from typing import Iterable, Optional

from oripro_dashboard.menu.models import Capabilities, MenuNode


def _depth_first(tree: Iterable[MenuNode]):
    """하위 노드를 부모보다 먼저 방문하는 깊이 우선 순회"""
    for node in tree:
        yield from _depth_first(node.children)
        yield node


def find_menu_node(tree: Iterable[MenuNode], path: str) -> Optional[MenuNode]:
    """
    경로에 대응하는 메뉴 노드 찾기

    1. url이 경로와 정확히 일치하는 노드가 트리 어디든 있으면 그 노드
    2. 없으면 url이 경로의 접두어인 노드 중 url이 가장 긴 노드
       (예: '/users/edit/123' -> '/users')

    길이가 같은 후보는 순회 순서상 먼저 만난 노드를 사용합니다.
    그룹 헤더('#')는 대상이 아닙니다.

    Args:
        tree: 메뉴 트리
        path: 현재 경로

    Returns:
        일치하는 MenuNode 또는 None
    """
    if not path:
        return None

    prefix_match = None
    for node in _depth_first(tree):
        if node.is_group:
            continue
        if node.url == path:
            return node
        if path.startswith(node.url):
            if prefix_match is None or len(node.url) > len(prefix_match.url):
                prefix_match = node

    return prefix_match


def resolve_capabilities(tree: Iterable[MenuNode], path: str) -> Capabilities:
    """
    현재 경로의 작업 권한 계산

    조상 노드의 권한과 합치지 않고, 가장 구체적으로 일치한 노드의 권한만 사용합니다.
    일치하는 노드가 없으면 모든 권한이 False입니다.
    """
    node = find_menu_node(tree, path)
    if node is None:
        return Capabilities.none()
    return node.capabilities

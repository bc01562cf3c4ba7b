"""
작업 부모 관계 페이지

작업 사이의 부모-자식 관계를 트리로 표시하고 부모 작업을 지정하거나 해제합니다.
"""

from typing import List

import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import render_empty
from oripro_dashboard.ui.session_state import AppContext

logger = setup_logger('TaskParentsPage')


def parent_ids_of(task: dict) -> List[int]:
    """parent_task_ids (문자열 id는 정수로 변환)"""
    return [int(parent_id) for parent_id in task.get('parent_task_ids') or []]


def build_task_hierarchy(tasks: List[dict]) -> List[dict]:
    """
    작업 목록을 부모-자식 트리로 구성

    부모가 여럿인 작업은 각 부모 아래에 표시됩니다. 목록에 없는 부모만 가진
    작업은 루트로 취급합니다.

    Returns:
        'children' 키가 추가된 루트 작업 목록 (원본은 변경하지 않음)
    """
    nodes = {task['id']: {**task, 'children': []} for task in tasks if 'id' in task}
    roots = []
    for node in nodes.values():
        parents = [nodes[parent_id] for parent_id in parent_ids_of(node) if parent_id in nodes]
        if not parents:
            roots.append(node)
        for parent in parents:
            parent['children'].append(node)

    # 순환 관계에만 속한 작업도 루트로 표시
    reached = set()
    for root in roots:
        reached.update(_subtree_ids(root))
    for node in nodes.values():
        if node['id'] not in reached:
            roots.append(node)
            reached.update(_subtree_ids(node))
    return roots


def _subtree_ids(node: dict) -> set:
    ids = set()
    pending = [node]
    while pending:
        current = pending.pop()
        if current['id'] not in ids:
            ids.add(current['id'])
            pending.extend(current['children'])
    return ids


def render_task_parents_page(ctx: AppContext):
    """작업 부모 관계 페이지 렌더링"""
    st.title("🌳 Task Parents")
    st.caption("Kelola hierarki relasi parent-child antar tasks")

    result = ctx.api.tasks.list()
    if not result.success:
        ctx.notifier.api_error(result, "Gagal memuat tasks")
        render_empty("Data task tidak dapat dimuat.")
        return

    tasks = result.items()
    if not tasks:
        render_empty("Belum ada task.")
        return

    for root in build_task_hierarchy(tasks):
        _render_task_node(ctx, root, path=())

    st.markdown("---")
    _render_parent_editor(ctx, tasks)


def _render_task_node(ctx: AppContext, node: dict, path: tuple):
    depth = len(path)
    badge = " · Main" if node.get('is_main_task') else ""
    st.markdown(f"{'&nbsp;' * 4 * depth}{'↳ ' if depth else ''}**{node.get('name')}**{badge}")

    if path and ctx.capabilities().can_edit:
        parent_id = path[-1]
        if st.button("Lepas dari parent", key=f"remove_parent_{'_'.join(map(str, path))}_{node['id']}"):
            remove_parent(ctx, node, parent_id)
            st.rerun()

    # 순환 관계는 한 번만 표시
    for child in node['children']:
        if child['id'] not in path:
            _render_task_node(ctx, child, path + (node['id'],))


def _render_parent_editor(ctx: AppContext, tasks: List[dict]):
    if not ctx.capabilities().can_edit:
        return

    st.subheader("Atur parent task")
    names = {task['id']: task.get('name') or str(task['id']) for task in tasks if 'id' in task}
    task_id = st.selectbox("Task", options=list(names.keys()), format_func=lambda value: names[value],
                           key='task_parents_task')
    current = next(task for task in tasks if task.get('id') == task_id)
    parent_ids = st.multiselect(
        "Parent tasks",
        options=[value for value in names if value != task_id],
        default=[value for value in parent_ids_of(current) if value in names and value != task_id],
        format_func=lambda value: names[value],
        key=f"task_parents_{task_id}"
    )
    if st.button("💾 Simpan relasi", key='task_parents_save'):
        save_task_parents(ctx, task_id, parent_ids)
        st.rerun()


def save_task_parents(ctx: AppContext, task_id, parent_ids: List[int]) -> bool:
    """
    작업의 부모 목록 저장

    자기 자신은 부모가 될 수 없습니다.
    """
    parent_ids = [int(parent_id) for parent_id in parent_ids if int(parent_id) != int(task_id)]
    result = ctx.api.tasks.update(task_id, {'parent_task_ids': parent_ids})
    if not result.success:
        ctx.notifier.api_error(result, "Gagal memperbarui relasi parent task")
        return False

    logger.info(f"Task {task_id} parents set to {parent_ids}")
    ctx.notifier.success("Relasi parent task berhasil diperbarui")
    return True


def remove_parent(ctx: AppContext, task: dict, parent_id) -> bool:
    """작업에서 부모 하나를 해제"""
    remaining = [value for value in parent_ids_of(task) if value != int(parent_id)]
    result = ctx.api.tasks.update(task['id'], {'parent_task_ids': remaining})
    if not result.success:
        ctx.notifier.api_error(result, "Gagal menghapus relasi parent task")
        return False

    logger.info(f"Task {task['id']} detached from parent {parent_id}")
    ctx.notifier.success("Relasi parent task berhasil dihapus")
    return True
